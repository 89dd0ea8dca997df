"""
config.py — Runtime Settings
=============================
Everything tunable lives here and is read from the environment once at
start-up.  Variables (all optional):

    SEARCHLAB_SECRET_KEY    Flask session key (random per process if unset)
    SEARCHLAB_LLM_API_BASE  OpenAI-compatible endpoint for the "explain" panel
    SEARCHLAB_LLM_MODEL     model name sent to that endpoint
    SEARCHLAB_LLM_API_KEY   bearer token, if the endpoint wants one
    SEARCHLAB_LLM_TIMEOUT   request timeout in seconds
    SEARCHLAB_MAX_STEPS     step cap for drivers (stepper / recorder)
    SEARCHLAB_SPEED         default playback preset (slow/medium/fast/turbo)
    SEARCHLAB_LOG_LEVEL     DEBUG / INFO / WARNING / ERROR
"""

import os
import secrets
from dataclasses import dataclass, field
from typing import Mapping, Optional

from logger import get_logger, is_level_name

log = get_logger(__name__)

PREFIX = "SEARCHLAB_"


@dataclass
class Settings:
    secret_key:   str           = field(default_factory=lambda: secrets.token_hex(32))
    llm_api_base: str           = "http://localhost:11434/v1"
    llm_model:    str           = "qwen2.5:7b"
    llm_api_key:  Optional[str] = None
    llm_timeout:  int           = 30
    max_steps:    int           = 500
    speed:        str           = "medium"
    log_level:    str           = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, default):
            return env.get(PREFIX + name) or default

        return cls(
            secret_key=get("SECRET_KEY", defaults.secret_key),
            llm_api_base=get("LLM_API_BASE", defaults.llm_api_base).rstrip("/"),
            llm_model=get("LLM_MODEL", defaults.llm_model),
            llm_api_key=get("LLM_API_KEY", None),
            llm_timeout=_positive_int(env, "LLM_TIMEOUT", defaults.llm_timeout),
            max_steps=_positive_int(env, "MAX_STEPS", defaults.max_steps),
            speed=get("SPEED", defaults.speed),
            log_level=_log_level(env, "LOG_LEVEL", defaults.log_level),
        )


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(PREFIX + name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("%s%s=%r is not an integer, using %d", PREFIX, name, raw, default)
        return default
    if value <= 0:
        log.warning("%s%s=%d must be positive, using %d", PREFIX, name, value, default)
        return default
    return value


def _log_level(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(PREFIX + name)
    if not raw:
        return default
    if not is_level_name(raw):
        log.warning("%s%s=%r is not a log level, using %s", PREFIX, name, raw, default)
        return default
    return raw.upper()
