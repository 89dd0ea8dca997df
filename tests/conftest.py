"""Shared fixtures for the search lab tests.

Provides:
- catalog scenarios by key
- a factory for small ad-hoc scenarios (unreachable goals, bad weights, …)
- a Flask test client wired to deterministic Settings
"""

from typing import Iterable, Optional, Tuple

import pytest

from config import Settings
from graph import Scenario, get_scenario


def build_scenario(
    edges: Iterable[Tuple[str, str, float]],
    nodes: Optional[Iterable[str]] = None,
    start: str = "S",
    goal: str = "G",
    key: str = "adhoc",
) -> Scenario:
    """Scenario from (source, target, weight) triples; nodes default to every endpoint."""
    edges = list(edges)
    if nodes is None:
        seen = []
        for s, t, _ in edges:
            for nid in (s, t):
                if nid not in seen:
                    seen.append(nid)
        nodes = seen
    return Scenario.from_dict({
        "key": key,
        "title": key,
        "start": start,
        "goal": goal,
        "nodes": [{"id": n, "x": 0, "y": 0} for n in nodes],
        "edges": [{"source": s, "target": t, "weight": w} for s, t, w in edges],
    })


@pytest.fixture
def make_scenario():
    return build_scenario


@pytest.fixture
def standard() -> Scenario:
    return get_scenario("standard")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        secret_key="test-secret",
        llm_api_base="http://llm.test/v1",
        llm_model="test-model",
        llm_timeout=5,
        max_steps=50,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    from main import create_app

    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
