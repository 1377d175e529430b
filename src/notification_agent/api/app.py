"""Host bridge HTTP API.

Receives host events over HTTP and dispatches them into the agent.
"""

import logging
from typing import Any

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from notification_agent.api.dependencies import AgentDep, HandlerDep, lifespan
from notification_agent.config import settings
from notification_agent.dto import (
    ActivateResponse,
    ClickResponse,
    FetchResponse,
    HealthCheckResponse,
    InstallResponse,
    LifecycleResponse,
    NotificationClickRequest,
    NotificationCloseRequest,
    NotificationResponse,
    PushResponse,
    SyncRequest,
)

app = FastAPI(
    title="Notification Agent",
    description="Push notification and offline cache agent for the dining club app",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root(agent: AgentDep) -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Notification Agent",
        "version": "0.1.0",
        "state": agent.state.value,
        "endpoints": {
            "lifecycle": "/lifecycle",
            "fetch": "/fetch",
            "events": "/events",
            "notifications": "/notifications",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/lifecycle", response_model=LifecycleResponse)
async def get_lifecycle(handler: HandlerDep) -> LifecycleResponse:
    """Get the agent's lifecycle state and cache namespace."""
    return await handler.get_lifecycle()


@app.post("/lifecycle/install", response_model=InstallResponse)
async def install(handler: HandlerDep) -> InstallResponse:
    """Precache the manifest under the current namespace."""
    return await handler.install()


@app.post("/lifecycle/activate", response_model=ActivateResponse)
async def activate(handler: HandlerDep) -> ActivateResponse:
    """Drop stale cache namespaces and start handling events."""
    return await handler.activate()


@app.get("/fetch", response_model=FetchResponse)
async def fetch(handler: HandlerDep, url: str = Query(..., min_length=1)) -> FetchResponse:
    """Serve a GET request through the cache-first interceptor."""
    return await handler.fetch(url)


@app.post("/events/push", response_model=PushResponse)
async def push(request: Request, handler: HandlerDep) -> PushResponse:
    """Deliver a push message; the raw request body is the payload."""
    return await handler.push(await request.body())


@app.post("/events/notification-click", response_model=ClickResponse)
async def notification_click(request: NotificationClickRequest, handler: HandlerDep) -> ClickResponse:
    """Report a click on a displayed notification."""
    return await handler.click(request)


@app.post("/events/notification-close", response_model=dict[str, bool])
async def notification_close(request: NotificationCloseRequest, handler: HandlerDep) -> dict:
    """Report that a displayed notification was dismissed."""
    return await handler.close(request)


@app.post("/events/sync", response_model=dict[str, Any])
async def sync(request: SyncRequest, handler: HandlerDep) -> dict:
    """Fire the host's background retry trigger."""
    return await handler.sync(request)


@app.get("/notifications", response_model=list[NotificationResponse])
async def list_notifications(handler: HandlerDep) -> list[NotificationResponse]:
    """List displayed notifications."""
    return handler.list_notifications()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level)
    uvicorn.run(
        "notification_agent.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
