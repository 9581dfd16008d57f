"""
Request shapes understood by the failover interceptor.

The interceptor reads and writes a single attribute, ``target_host``;
everything else a request carries is passed through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from host_failover.core.domain.base import InternalDTO


@dataclass
class OutgoingRequest(InternalDTO):
    """A transport-agnostic outgoing request."""

    target_host: str
    method: str = "GET"
    path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    content: Any = None


class HttpxRequestTarget:
    """Exposes an ``httpx.Request`` host as a mutable ``target_host``.

    Setting the host rewrites the request URL and its ``Host`` header;
    scheme, port, path, query and body are kept.
    """

    def __init__(self, request: httpx.Request) -> None:
        self.request = request

    @property
    def target_host(self) -> str:
        return self.request.url.host

    @target_host.setter
    def target_host(self, host: str) -> None:
        self.request.url = self.request.url.copy_with(host=host)
        self.request.headers["Host"] = self.request.url.netloc.decode("ascii")

    def __repr__(self) -> str:
        return f"<HttpxRequestTarget {self.request.method} {self.request.url}>"
