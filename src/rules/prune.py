"""Visibility rules deciding which symbols get published."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from artifacts.models.artifacts.symbols import Symbol
    from rules.config import PublishConfig

logger = logging.getLogger(__name__)

ANONYMOUS = "<anonymous>"

# Access levels that can be filtered individually through the access list.
_LISTED_LEVELS = ("package", "public", "protected")


@dataclass(frozen=True)
class VisibilityPolicy:
    """Which access levels are published.

    ``access`` mirrors the parser's access option: empty means "use the
    defaults" (everything except private), ``all`` disables filtering, and
    ``undefined`` stands for symbols without an access level.
    """

    show_private: bool = False
    access: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_config(cls, config: PublishConfig) -> VisibilityPolicy:
        return cls(show_private=config.show_private, access=frozenset(config.access))

    def allows(self, access: str | None) -> bool:
        if "all" in self.access:
            return True

        if access in _LISTED_LEVELS:
            return not self.access or access in self.access

        if access == "private":
            return self.show_private or "private" in self.access

        if access is None:
            return not self.access or "undefined" in self.access

        return True


def _is_documented(symbol: Symbol) -> bool:
    if symbol.undocumented:
        return False
    return bool(symbol.description or getattr(symbol, "classdesc", None))


def _has_anonymous_container(symbol: Symbol) -> bool:
    memberof = symbol.memberof
    return memberof is not None and (
        memberof == ANONYMOUS or memberof.startswith(f"{ANONYMOUS}~")
    )


def is_published(symbol: Symbol, policy: VisibilityPolicy) -> bool:
    """Return True when the symbol survives pruning."""
    if not _is_documented(symbol):
        return False
    if symbol.ignore:
        return False
    if _has_anonymous_container(symbol):
        return False
    return policy.allows(symbol.access)


def sort_symbols(symbols: Iterable[Symbol]) -> list[Symbol]:
    """Sort by (longname, version, since); ties keep their input order."""
    return sorted(
        symbols,
        key=lambda s: (s.longname, s.version or "", s.since or ""),
    )


def prune(symbols: Sequence[Symbol], policy: VisibilityPolicy) -> list[Symbol]:
    """Remove symbols that will not be published and sort the rest.

    Removed: undocumented symbols, symbols tagged ``@ignore``, members of
    anonymous containers and symbols whose access level the policy excludes.
    """
    kept = [symbol for symbol in symbols if is_published(symbol, policy)]
    logger.debug("pruned %d of %d symbols", len(symbols) - len(kept), len(symbols))
    return sort_symbols(kept)


__all__ = ["ANONYMOUS", "VisibilityPolicy", "is_published", "prune", "sort_symbols"]
