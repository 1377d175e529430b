"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on the agent, not directly on services or repositories.

Architecture:
    Handler -> Agent -> Service -> Repository
"""

from .agent_handler import AgentHandler

__all__ = [
    "AgentHandler",
]
