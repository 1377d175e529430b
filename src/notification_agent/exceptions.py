"""Exceptions raised by the notification agent."""


class AgentError(Exception):
    """Base class for agent errors."""


class LifecycleError(AgentError):
    """Raised on an illegal lifecycle transition."""


class AgentNotActiveError(LifecycleError):
    """Raised when a runtime event is dispatched before activation completes."""


class InstallError(AgentError):
    """Raised when a manifest asset cannot be precached.

    Attributes:
        url: The manifest URL that failed
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to precache {url}: {reason}")
        self.url = url
        self.reason = reason
