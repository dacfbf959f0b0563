"""fountaintree configuration module."""

from fountaintree.config.logging import configure_logging
from fountaintree.config.settings import (
    FountainTreeSettings,
    find_project_config,
    get_settings,
    load_settings,
    reset_settings,
    set_settings,
)

__all__ = [
    "FountainTreeSettings",
    "configure_logging",
    "find_project_config",
    "get_settings",
    "load_settings",
    "reset_settings",
    "set_settings",
]
