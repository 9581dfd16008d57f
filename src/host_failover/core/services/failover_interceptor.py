"""
Failover interceptor.

Wraps a downstream executor and, when a call fails with a classified
transient error, re-issues it exactly once against the backup host.
Failures are never wrapped: whatever the caller sees is the object the
downstream executor raised.
"""

from __future__ import annotations

from typing import Any

from host_failover.core.common.logging_utils import get_logger
from host_failover.core.domain.failover_config import FailoverConfig
from host_failover.core.interfaces.executor_interface import (
    IAsyncRequestExecutor,
    IRequestExecutor,
    ITargetedRequest,
)

logger = get_logger(__name__)


class FailoverInterceptor:
    """Retries a request once against the backup host on transient failure."""

    def __init__(
        self,
        downstream: IRequestExecutor | IAsyncRequestExecutor,
        config: FailoverConfig | dict[str, Any] | str | None,
    ) -> None:
        """Initialize the interceptor.

        Args:
            downstream: Executor performing the actual call
            config: A FailoverConfig, a mapping of options, or a bare backup
                host string

        Raises:
            ConfigurationError: If no usable backup host is configured
        """
        self._downstream = downstream
        self._config = FailoverConfig.from_value(config)

    @property
    def config(self) -> FailoverConfig:
        return self._config

    def handle(self, request: ITargetedRequest) -> Any:
        """Execute ``request``, failing over to the backup host at most once."""
        try:
            return self._downstream.execute(request)
        except Exception as error:
            if not self._should_fail_over(request, error):
                raise
            self._redirect(request, error)

        # Second and final attempt: nothing raised here is classified
        return self._downstream.execute(request)

    async def ahandle(self, request: ITargetedRequest) -> Any:
        """Async variant of handle for executors with a coroutine ``execute``."""
        try:
            return await self._downstream.execute(request)
        except Exception as error:
            if not self._should_fail_over(request, error):
                raise
            self._redirect(request, error)

        return await self._downstream.execute(request)

    def _should_fail_over(self, request: ITargetedRequest, error: Exception) -> bool:
        if not self._config.matches(error):
            logger.debug(
                "Failure not classified for failover",
                target_host=request.target_host,
                error_type=type(error).__name__,
            )
            return False

        if self._config.is_backup_host(request.target_host):
            logger.debug(
                "Failure on backup host, not failing over again",
                target_host=request.target_host,
                error_type=type(error).__name__,
            )
            return False

        return True

    def _redirect(self, request: ITargetedRequest, error: Exception) -> None:
        logger.warning(
            "Failing over to backup host",
            original_host=request.target_host,
            backup_host=self._config.backup_host,
            error_type=type(error).__name__,
            error=str(error),
        )
        request.target_host = self._config.backup_host
