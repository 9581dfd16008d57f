# Configuration package

from host_failover.core.config.config_loader import (
    ConfigLoader,
    load_failover_config,
)

__all__ = ["ConfigLoader", "load_failover_config"]
