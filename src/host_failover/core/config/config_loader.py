"""
Failover configuration loading.

Options come from environment variables (a ``.env`` file is honoured) and
from an optional YAML or JSON file whose values take precedence.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from host_failover.core.common.exceptions import ConfigurationError
from host_failover.core.domain.failover_config import FailoverConfig

logger = logging.getLogger(__name__)

BACKUP_HOST_ENV = "FAILOVER_BACKUP_HOST"
EXCEPTIONS_ENV = "FAILOVER_EXCEPTIONS"

_BACKUP_HOST_KEYS = ("backup_host", "host", "backupHost")
_CLASSIFIER_KEYS = ("classifiers", "exceptions")


def _split_names(raw: str) -> list[str]:
    """Split a comma-separated list of classifier names, dropping blanks."""
    return [name.strip() for name in raw.split(",") if name.strip()]


class ConfigLoader:
    """Loads a FailoverConfig from the environment and an optional file."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the configuration loader.

        Args:
            env: Environment mapping to read; defaults to ``os.environ``
                after loading ``.env``
        """
        self._env = env

    def load_config(self, config_file: str | Path | None = None) -> FailoverConfig:
        """Load the failover configuration.

        Args:
            config_file: Optional path to a YAML or JSON configuration file

        Returns:
            The validated configuration

        Raises:
            FileNotFoundError: If config_file doesn't exist
            ConfigurationError: If the file is malformed or no backup host
                is configured anywhere
        """
        options = self._load_env_options()
        if config_file:
            file_options = self._load_config_file(config_file)
            options.update(file_options)
            logger.debug(
                "Loaded failover options from %s: %s", config_file, sorted(file_options)
            )
        return FailoverConfig.from_value(options)

    def _load_env_options(self) -> dict[str, Any]:
        env = self._env
        if env is None:
            load_dotenv(find_dotenv(usecwd=True))
            env = os.environ

        options: dict[str, Any] = {}
        backup_host = env.get(BACKUP_HOST_ENV)
        if backup_host:
            options["backup_host"] = backup_host
        exceptions = env.get(EXCEPTIONS_ENV)
        if exceptions:
            options["classifiers"] = _split_names(exceptions)
        return options

    def _load_config_file(self, config_file: str | Path) -> dict[str, Any]:
        path = Path(config_file)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        content = path.read_text(encoding="utf-8")
        # Try YAML first, then JSON
        try:
            data: Any = yaml.safe_load(content)
        except yaml.YAMLError:
            try:
                data = json.loads(content)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(
                    f"Invalid configuration file format: {exc}",
                    details={"path": str(path)},
                ) from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping",
                details={"path": str(path), "type": type(data).__name__},
            )
        return self._normalize_file_options(data)

    @staticmethod
    def _normalize_file_options(data: dict[str, Any]) -> dict[str, Any]:
        options: dict[str, Any] = {}
        for key in _BACKUP_HOST_KEYS:
            if key in data:
                options["backup_host"] = data[key]
                break
        for key in _CLASSIFIER_KEYS:
            if key in data:
                value = data[key]
                options["classifiers"] = (
                    _split_names(value) if isinstance(value, str) else value
                )
                break
        return options


def load_failover_config(config_file: str | Path | None = None) -> FailoverConfig:
    """Load the failover configuration from the process environment and file."""
    return ConfigLoader().load_config(config_file)
