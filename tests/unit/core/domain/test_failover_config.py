"""
Tests for the failover configuration value object.
"""

import httpx
import pytest
from host_failover.core.common.exceptions import ConfigurationError
from host_failover.core.domain.classification import DEFAULT_CLASSIFIERS
from host_failover.core.domain.failover_config import FailoverConfig
from pydantic import ValidationError


class CustomError(Exception):
    pass


def test_defaults_applied_when_classifiers_unset() -> None:
    config = FailoverConfig(backup_host="backup.example.com")

    assert config.backup_host == "backup.example.com"
    assert config.classifiers == DEFAULT_CLASSIFIERS


@pytest.mark.parametrize("classifiers", [None, [], ()])
def test_empty_classifiers_use_defaults(classifiers: object) -> None:
    config = FailoverConfig(backup_host="backup.example.com", classifiers=classifiers)

    assert config.classifiers == DEFAULT_CLASSIFIERS


def test_supplied_classifiers_replace_defaults() -> None:
    config = FailoverConfig(
        backup_host="backup.example.com", classifiers=[CustomError, "Timeout::Error"]
    )

    assert config.classifiers == (CustomError, "Timeout::Error")
    assert not config.matches(httpx.ConnectError("refused"))
    assert config.matches(CustomError())


@pytest.mark.parametrize(
    "options",
    [
        {"backup_host": "backup.example.com", "classifiers": [CustomError]},
        {"host": "backup.example.com", "exceptions": [CustomError]},
        {"backupHost": "backup.example.com", "exceptions": CustomError},
    ],
)
def test_option_aliases(options: dict) -> None:
    config = FailoverConfig.from_value(options)

    assert config.backup_host == "backup.example.com"
    assert config.classifiers == (CustomError,)


def test_single_name_is_wrapped() -> None:
    config = FailoverConfig(backup_host="backup.example.com", classifiers="TimeoutError")

    assert config.classifiers == ("TimeoutError",)


def test_duplicates_are_dropped_in_order() -> None:
    config = FailoverConfig(
        backup_host="backup.example.com",
        classifiers=["TimeoutError", CustomError, " TimeoutError ", CustomError],
    )

    assert config.classifiers == ("TimeoutError", CustomError)


def test_backup_host_is_stripped_and_keeps_its_case() -> None:
    config = FailoverConfig(backup_host="  Backup.Example.COM ")

    assert config.backup_host == "Backup.Example.COM"
    assert config.is_backup_host("backup.example.com")
    assert config.is_backup_host("BACKUP.example.com")
    assert not config.is_backup_host("primary.example.com")
    assert not config.is_backup_host(None)


@pytest.mark.parametrize("backup_host", ["::1", "10.0.0.2", "bücher.example"])
def test_ip_and_international_hosts_are_accepted(backup_host: str) -> None:
    assert FailoverConfig(backup_host=backup_host).backup_host == backup_host


@pytest.mark.parametrize(
    "backup_host",
    [
        "",
        "   ",
        None,
        8080,
        "backup.example.com:8443",
        "http://backup.example.com",
        "backup.example.com/api",
        "user@backup.example.com",
        "backup example.com",
    ],
)
def test_invalid_backup_host_raises(backup_host: object) -> None:
    with pytest.raises(ConfigurationError):
        FailoverConfig(backup_host=backup_host)


def test_missing_backup_host_raises() -> None:
    with pytest.raises(ConfigurationError):
        FailoverConfig()


def test_blank_classifier_name_raises() -> None:
    with pytest.raises(ConfigurationError):
        FailoverConfig(backup_host="backup.example.com", classifiers=["TimeoutError", " "])


@pytest.mark.parametrize("classifiers", [42, {"TimeoutError": True}])
def test_classifiers_must_be_a_collection(classifiers: object) -> None:
    with pytest.raises(ConfigurationError):
        FailoverConfig(backup_host="backup.example.com", classifiers=classifiers)


def test_non_exception_classifier_rejected_by_from_value() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        FailoverConfig.from_value({"backup_host": "backup.example.com", "classifiers": [int]})

    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert exc_info.value.details["errors"]


def test_config_is_immutable() -> None:
    config = FailoverConfig(backup_host="backup.example.com")

    with pytest.raises(ValidationError):
        config.backup_host = "other.example.com"  # type: ignore[misc]


def test_from_value_accepts_bare_host_string() -> None:
    assert FailoverConfig.from_value("backup.example.com") == FailoverConfig(
        backup_host="backup.example.com"
    )


def test_from_value_returns_existing_config() -> None:
    config = FailoverConfig(backup_host="backup.example.com")

    assert FailoverConfig.from_value(config) is config


@pytest.mark.parametrize("value", [None, 42, ["backup.example.com"]])
def test_from_value_rejects_unsupported_shapes(value: object) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        FailoverConfig.from_value(value)

    assert exc_info.value.to_dict()["error"]["type"] == "ConfigurationError"


def test_describe_classifiers() -> None:
    config = FailoverConfig(backup_host="backup.example.com")

    assert config.describe_classifiers() == [
        "TimeoutError",
        "httpx.TimeoutException",
        "httpx.ConnectError",
    ]
    assert repr(config) == '<FailoverConfig backup_host="backup.example.com">'


def test_configuration_error_to_dict() -> None:
    error = ConfigurationError("bad host", details={"backup_host": "x:1"})

    assert error.to_dict() == {
        "error": {
            "message": "bad host",
            "type": "ConfigurationError",
            "details": {"backup_host": "x:1"},
        }
    }
    assert str(error) == "bad host"
