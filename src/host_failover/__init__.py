"""Single-retry host failover for outgoing HTTP requests."""

from host_failover.core.common.exceptions import ConfigurationError, HostFailoverError
from host_failover.core.config.config_loader import ConfigLoader, load_failover_config
from host_failover.core.domain.classification import (
    DEFAULT_CLASSIFIERS,
    FailureClassifier,
    canonical_name,
)
from host_failover.core.domain.failover_config import FailoverConfig
from host_failover.core.domain.request import HttpxRequestTarget, OutgoingRequest
from host_failover.core.services.failover_interceptor import FailoverInterceptor
from host_failover.core.transport.httpx_transport import (
    AsyncFailoverTransport,
    FailoverTransport,
)

__all__ = [
    "DEFAULT_CLASSIFIERS",
    "AsyncFailoverTransport",
    "ConfigLoader",
    "ConfigurationError",
    "FailoverConfig",
    "FailoverInterceptor",
    "FailoverTransport",
    "FailureClassifier",
    "HostFailoverError",
    "HttpxRequestTarget",
    "OutgoingRequest",
    "canonical_name",
    "load_failover_config",
]
