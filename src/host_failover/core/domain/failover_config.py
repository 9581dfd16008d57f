from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import AliasChoices, Field, ValidationError, field_validator

from host_failover.core.common.exceptions import ConfigurationError
from host_failover.core.domain.base import ValueObject
from host_failover.core.domain.classification import (
    DEFAULT_CLASSIFIERS,
    FailureClassifier,
    describe_classifier,
    is_classified_failure,
)


def _is_bare_host(host: str) -> bool:
    """Return True if ``host`` can be substituted into a URL unchanged.

    Rejects schemes, ports, paths, credentials and whitespace: anything that
    would make the URL host differ from the configured value.
    """
    try:
        url = httpx.URL("http://placeholder/").copy_with(host=host)
    except httpx.InvalidURL:
        return False
    return url.host.lower() == host.lower()


class FailoverConfig(ValueObject):
    """Backup host and the failure kinds that trigger a failover to it.

    Built once when the request pipeline is assembled and shared read-only
    by every call going through it.
    """

    backup_host: str = Field(
        default="",
        validate_default=True,
        validation_alias=AliasChoices("backup_host", "host", "backupHost"),
        description="Host substituted into the request on failover.",
    )
    classifiers: tuple[FailureClassifier, ...] = Field(
        default=DEFAULT_CLASSIFIERS,
        validation_alias=AliasChoices("classifiers", "exceptions"),
        description="Exception types or canonical type names that qualify for failover.",
    )

    @field_validator("backup_host", mode="before")
    @classmethod
    def _validate_backup_host(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(
                "A non-empty backup host is required for failover",
                details={"backup_host": value},
            )
        host = value.strip()
        if not _is_bare_host(host):
            raise ConfigurationError(
                "Backup host must be a bare host name without scheme, port or path",
                details={"backup_host": value},
            )
        return host

    @field_validator("classifiers", mode="before")
    @classmethod
    def _validate_classifiers(cls, value: Any) -> tuple[Any, ...]:
        if value is None:
            return DEFAULT_CLASSIFIERS
        if isinstance(value, (str, type)):
            value = (value,)
        elif not isinstance(value, (list, tuple, set, frozenset)):
            raise ConfigurationError(
                "Failover classifiers must be a collection of exception types or names",
                details={"classifiers": repr(value)},
            )

        items = tuple(value)
        if not items:
            return DEFAULT_CLASSIFIERS

        for item in items:
            if isinstance(item, str) and not item.strip():
                raise ConfigurationError(
                    "Failover classifier names must not be empty",
                    details={"classifiers": [repr(i) for i in items]},
                )
        return tuple(dict.fromkeys(i.strip() if isinstance(i, str) else i for i in items))

    @classmethod
    def from_value(cls, value: Any) -> FailoverConfig:
        """Build a config from any supported option shape.

        Args:
            value: A ``FailoverConfig``, a mapping of options, or a bare
                backup host string

        Returns:
            The validated configuration

        Raises:
            ConfigurationError: If the value is missing or invalid
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            value = {"backup_host": value}
        if not isinstance(value, Mapping):
            raise ConfigurationError(
                "Unsupported failover configuration",
                details={"type": type(value).__name__},
            )
        try:
            return cls.model_validate(dict(value))
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid failover configuration: {exc}",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    def matches(self, error: BaseException) -> bool:
        """Return True if ``error`` qualifies for failover."""
        return is_classified_failure(error, self.classifiers)

    def is_backup_host(self, host: str | None) -> bool:
        # Host names are case-insensitive; httpx reports them lowercased
        return host is not None and host.lower() == self.backup_host.lower()

    def describe_classifiers(self) -> list[str]:
        return [describe_classifier(c) for c in self.classifiers]
