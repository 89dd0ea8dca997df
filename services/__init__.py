"""
services/
---------
Outbound integrations.

    from services import ExplainClient, FALLBACK_MESSAGE
"""

from services.explain import ExplainClient, FALLBACK_MESSAGE, build_prompt

__all__ = [
    "ExplainClient",
    "FALLBACK_MESSAGE",
    "build_prompt",
]
