"""
httpx transport middleware.

Drop-in transports that put a FailoverInterceptor in front of another
transport, for example::

    transport = FailoverTransport(httpx.HTTPTransport(), "backup.example.com")
    with httpx.Client(transport=transport) as client:
        client.get("https://primary.example.com/status")

Request bodies must be replayable (bytes content) for the retry to resend them.
"""

from __future__ import annotations

from typing import Any

import httpx

from host_failover.core.domain.failover_config import FailoverConfig
from host_failover.core.domain.request import HttpxRequestTarget
from host_failover.core.services.failover_interceptor import FailoverInterceptor


class _TransportExecutor:
    def __init__(self, transport: httpx.BaseTransport) -> None:
        self._transport = transport

    def execute(self, target: HttpxRequestTarget) -> httpx.Response:
        return self._transport.handle_request(target.request)


class _AsyncTransportExecutor:
    def __init__(self, transport: httpx.AsyncBaseTransport) -> None:
        self._transport = transport

    async def execute(self, target: HttpxRequestTarget) -> httpx.Response:
        return await self._transport.handle_async_request(target.request)


class FailoverTransport(httpx.BaseTransport):
    """Sync transport failing over to a backup host on transient errors."""

    def __init__(
        self,
        transport: httpx.BaseTransport,
        config: FailoverConfig | dict[str, Any] | str | None,
    ) -> None:
        self._transport = transport
        self._interceptor = FailoverInterceptor(_TransportExecutor(transport), config)

    @property
    def config(self) -> FailoverConfig:
        return self._interceptor.config

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self._interceptor.handle(HttpxRequestTarget(request))  # type: ignore[no-any-return]

    def close(self) -> None:
        self._transport.close()


class AsyncFailoverTransport(httpx.AsyncBaseTransport):
    """Async transport failing over to a backup host on transient errors."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport,
        config: FailoverConfig | dict[str, Any] | str | None,
    ) -> None:
        self._transport = transport
        self._interceptor = FailoverInterceptor(
            _AsyncTransportExecutor(transport), config
        )

    @property
    def config(self) -> FailoverConfig:
        return self._interceptor.config

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._interceptor.ahandle(HttpxRequestTarget(request))  # type: ignore[no-any-return]

    async def aclose(self) -> None:
        await self._transport.aclose()
