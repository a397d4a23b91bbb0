"""Configuration and visibility rules for docgraft."""

from rules.config import (
    CONSOLE_DESTINATION,
    ConfigError,
    PublishConfig,
    load_config,
    resolve_destination,
)
from rules.prune import VisibilityPolicy, is_published, prune

__all__ = [
    "CONSOLE_DESTINATION",
    "ConfigError",
    "PublishConfig",
    "VisibilityPolicy",
    "is_published",
    "load_config",
    "prune",
    "resolve_destination",
]
