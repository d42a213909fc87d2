"""Suite configuration."""

from saucesuite.config.settings import (
    LOG_FORMAT,
    SuiteConfig,
    configure_logging,
    get_config,
)

__all__ = ["LOG_FORMAT", "SuiteConfig", "configure_logging", "get_config"]
