"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Agent and collaborators stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from notification_agent.agent import NotificationAgent
from notification_agent.config import settings
from notification_agent.handlers import AgentHandler
from notification_agent.repositories import (
    HttpNetwork,
    InMemoryNotificationHost,
    NotificationsApiClient,
    RedisCacheRepository,
)

logger = logging.getLogger(__name__)


def get_agent(request: Request) -> NotificationAgent:
    """Dependency injection for NotificationAgent from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The NotificationAgent instance from app.state

    Raises:
        RuntimeError: If agent is not initialized
    """
    agent = getattr(request.app.state, "agent", None)
    if agent is None:
        raise RuntimeError("NotificationAgent not initialized. Check lifespan setup.")
    return agent


def get_handler(request: Request) -> AgentHandler:
    """Dependency injection for AgentHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The AgentHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "agent_handler", None)
    if handler is None:
        raise RuntimeError("AgentHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (Redis cache, network, notifications API, host)
    2. Agent - stored in app.state.agent
    3. Handler (HTTP endpoints) - stored in app.state.agent_handler

    Cleanup:
        Waits for outstanding events, closes clients, removes state
    """
    store = RedisCacheRepository.create()
    network = HttpNetwork.create()
    api = NotificationsApiClient.create()
    host = InMemoryNotificationHost()

    agent = NotificationAgent.create(store=store, network=network, host=host, api=api)
    agent_handler = AgentHandler(agent=agent, host=host, store=store)

    app.state.agent = agent
    app.state.agent_handler = agent_handler

    logger.info("Notification agent initialized")
    logger.info("Cache namespace: %s", agent.lifecycle.namespace)
    logger.info("Application origin: %s", settings.app_base_url)

    yield

    await agent.drain()
    await network.close()
    await api.close()
    await store.close()

    del app.state.agent_handler
    del app.state.agent
    logger.info("Notification agent shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[AgentHandler, Depends(get_handler)]
AgentDep = Annotated[NotificationAgent, Depends(get_agent)]
