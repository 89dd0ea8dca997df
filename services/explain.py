"""
explain.py — "Ask the Professor" Client
========================================
Sends a learner's question about the selected strategy to an
OpenAI-compatible `/chat/completions` endpoint and returns the Markdown
answer.

    client = ExplainClient.from_settings(Settings.from_env())
    answer = client.ask("Why is DFS not optimal?", get_algorithm("dfs"))

Design decisions:
  - The explanation panel is optional.  Any transport, HTTP or payload
    error is logged and turned into FALLBACK_MESSAGE; `ask()` never raises
    for a network problem, so a dead endpoint cannot break a search run.
  - No API key is required (local servers such as Ollama or llama.cpp
    accept anonymous requests).  When one is configured it goes out as a
    bearer token.
"""

import json
from typing import Any, Dict, List, Optional, Union

import requests

from algorithms import AlgoInfo, get_algorithm
from graph import Scenario
from logger import get_logger

log = get_logger(__name__)

FALLBACK_MESSAGE = (
    "I'm sorry, I couldn't process that request right now. "
    "Please check your connection or try again."
)

SYSTEM_PROMPT = (
    "You are a world-class computer science professor specializing in search algorithms. "
    "Answer clearly and concisely, using Markdown for formatting."
)

MAX_WORDS = 250


def build_prompt(algorithm_label: str, topic: str, scenario: Optional[Scenario] = None) -> str:
    """The user message sent to the model."""
    lines = [
        f"Explain the following topic in the context of {algorithm_label}: {topic}",
    ]
    if scenario is not None:
        lines.append(
            f"The student is looking at the '{scenario.title}' graph "
            f"({scenario.graph.node_count()} nodes, {scenario.graph.edge_count()} edges, "
            f"searching {scenario.start} to {scenario.goal}). {scenario.description}"
        )
    lines.append(
        "Provide an explanation that is:\n"
        "1. Technically accurate but accessible.\n"
        "2. Focused on search theory (Completeness, Optimality, Complexity).\n"
        "3. Formatted in Markdown.\n"
        f"4. Concise (Maximum {MAX_WORDS} words)."
    )
    return "\n".join(lines)


class ExplainClient:
    """
    Attributes:
        api_base : Endpoint root, e.g. http://localhost:11434/v1 (no trailing slash).
        model    : Model name passed through in the payload.
        timeout  : Seconds before the HTTP request is abandoned.
        api_key  : Optional bearer token.
    """

    def __init__(
        self,
        api_base: str = "http://localhost:11434/v1",
        model: str = "qwen2.5:7b",
        timeout: int = 30,
        api_key: Optional[str] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.model    = model
        self.timeout  = timeout
        self.api_key  = api_key

    @classmethod
    def from_settings(cls, settings) -> "ExplainClient":
        return cls(
            api_base=settings.llm_api_base,
            model=settings.llm_model,
            timeout=settings.llm_timeout,
            api_key=settings.llm_api_key,
        )

    def messages(self, topic: str, algo: AlgoInfo, scenario: Optional[Scenario] = None) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user",   "content": build_prompt(algo.label, topic, scenario)},
        ]

    def ask(
        self,
        topic: str,
        algorithm: Union[str, AlgoInfo],
        scenario: Optional[Scenario] = None,
    ) -> str:
        """Return the model's Markdown answer, or FALLBACK_MESSAGE on any failure."""
        algo = get_algorithm(algorithm)
        if algo is None:
            raise ValueError(f"Unknown strategy: {algorithm!r}")
        topic = (topic or "").strip()
        if not topic:
            raise ValueError("Question must not be empty")

        url = f"{self.api_base}/chat/completions"
        payload: Dict[str, Any] = {
            "model":       self.model,
            "messages":    self.messages(topic, algo, scenario),
            "temperature": 0.3,
        }
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            resp = requests.post(url, headers=headers, data=json.dumps(payload), timeout=self.timeout)
            resp.raise_for_status()
            content = resp.json()["choices"][0]["message"]["content"]
        except requests.RequestException as exc:
            log.warning("explain request to %s failed: %s", url, exc)
            return FALLBACK_MESSAGE
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            log.warning("explain response from %s was malformed: %r", url, exc)
            return FALLBACK_MESSAGE

        if not isinstance(content, str) or not content.strip():
            log.warning("explain response from %s had no content", url)
            return FALLBACK_MESSAGE
        log.debug("explain: %d chars for %s", len(content), algo.short)
        return content.strip()

    def __repr__(self) -> str:
        return f"ExplainClient({self.api_base!r}, model={self.model!r})"
