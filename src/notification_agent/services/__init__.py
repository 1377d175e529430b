"""Service layer for the agent's behaviour.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Agent -> Service -> Repository
    (Events) -> (Behaviour) -> (Cache, network, host, API)
"""

from .interaction_router import InteractionRouter, resolve_action_route
from .interceptor import RequestInterceptor
from .lifecycle import LifecycleManager, LifecycleState
from .push_handler import PushMessageHandler, resolve_profile
from .retry_task import BackgroundRetryTask

__all__ = [
    "BackgroundRetryTask",
    "InteractionRouter",
    "LifecycleManager",
    "LifecycleState",
    "PushMessageHandler",
    "RequestInterceptor",
    "resolve_action_route",
    "resolve_profile",
]
