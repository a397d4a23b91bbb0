"""Link registry and cross-reference resolution."""

from links.inline import resolve_links
from links.registry import (
    LinkRegistry,
    LinkResolutionError,
    RegistryFrozenError,
)

__all__ = [
    "LinkRegistry",
    "LinkResolutionError",
    "RegistryFrozenError",
    "resolve_links",
]
