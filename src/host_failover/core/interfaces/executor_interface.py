from __future__ import annotations

from typing import Any, Protocol


class ITargetedRequest(Protocol):
    """A request whose destination host can be rewritten in place."""

    target_host: str


class IRequestExecutor(Protocol):
    """Interface for the collaborator that performs the actual call."""

    def execute(self, request: Any) -> Any:
        """Send the request and return its response, or raise a failure."""


class IAsyncRequestExecutor(Protocol):
    """Async counterpart of IRequestExecutor."""

    async def execute(self, request: Any) -> Any:
        """Send the request and return its response, or raise a failure."""
