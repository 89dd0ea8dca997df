"""
errors.py — Error Taxonomy
===========================
Every failure the search engine can surface.

    SearchError
      ├── InvalidScenario     – malformed input graph, fatal at construction
      ├── BrokenChain         – parent chain does not lead back to the start
      └── StepLimitExceeded   – a driver's step cap was hit before termination

Design decisions:
  - InvalidScenario and BrokenChain are never repaired or retried.  The
    caller must not proceed with an engine that failed to build, and a
    broken parent chain means the engine itself is wrong.
  - StepLimitExceeded is only raised by SearchEngine.run().  The Stepper
    and Recorder report a hit cap as a flag instead of a crash.
"""

from typing import Optional, Sequence


class SearchError(Exception):
    """Base class for every search-engine error."""


class InvalidScenario(SearchError):
    """
    The scenario cannot be searched.

    Attributes:
        problems : Every problem found, in the order they were detected.
    """

    def __init__(self, message: str, problems: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.problems = list(problems) if problems else [message]


class BrokenChain(SearchError):
    """Path reconstruction walked into a node with no recorded parent."""

    def __init__(self, node_id: str, partial_path: Sequence[str]):
        super().__init__(
            f"Parent chain broken at '{node_id}' "
            f"(walked back: {' ← '.join(partial_path) or '-'})"
        )
        self.node_id = node_id
        self.partial_path = list(partial_path)


class StepLimitExceeded(SearchError):
    """The search did not terminate within `limit` expansions."""

    def __init__(self, limit: int, state=None):
        super().__init__(f"Search did not terminate within {limit} steps")
        self.limit = limit
        self.state = state


__all__ = [
    "SearchError",
    "InvalidScenario",
    "BrokenChain",
    "StepLimitExceeded",
]
