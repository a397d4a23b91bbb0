"""Per-symbol decorations: examples, see-links, anchor ids and breadcrumbs."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from artifacts.models.artifacts.symbols import (
    SCOPE_PUNCTUATION,
    Example,
    MemberSymbol,
)
from utils import htmlsafe

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from artifacts.models.artifacts.symbols import Symbol
    from links.registry import LinkRegistry

_CAPTIONED_EXAMPLE = re.compile(
    r"^\s*<caption>([\s\S]+?)</caption>(\s*[\n\r])([\s\S]+)$", re.IGNORECASE
)
_HASH = re.compile(r"^(#.+)")


def split_example(example: Example | str) -> Example:
    if isinstance(example, Example):
        return example
    match = _CAPTIONED_EXAMPLE.match(example)
    if match is None:
        return Example(code=example)
    return Example(caption=match.group(1), code=match.group(3))


def decorate_examples(symbols: Iterable[Symbol]) -> None:
    for symbol in symbols:
        symbol.examples = [split_example(example) for example in symbol.examples]


def hash_to_link(symbol: Symbol, see_item: str, registry: LinkRegistry) -> str:
    """Turn ``#fragment`` see-items into anchors on the symbol's own page."""
    if not _HASH.match(see_item):
        return see_item
    page = registry.require(symbol.longname).split("#", 1)[0]
    return f'<a href="{htmlsafe(page + see_item)}">{htmlsafe(see_item)}</a>'


def decorate_see(symbols: Iterable[Symbol], registry: LinkRegistry) -> None:
    for symbol in symbols:
        symbol.see = [hash_to_link(symbol, item, registry) for item in symbol.see]


def assign_ids(symbols: Iterable[Symbol], registry: LinkRegistry) -> None:
    """Set each symbol's anchor id: its url fragment, else its name."""
    for symbol in symbols:
        url = registry.require(symbol.longname)
        symbol.id = url.split("#")[-1] if "#" in url else symbol.name


def get_ancestor_links(
    by_longname: dict[str, Symbol],
    symbol: Symbol,
    registry: LinkRegistry,
    css_class: str | None = None,
) -> list[str]:
    """Breadcrumb anchors from the outermost ancestor down to the parent."""
    ancestors: list[str] = []
    seen: set[str] = set()
    parent_name = symbol.memberof
    while parent_name and parent_name not in seen:
        seen.add(parent_name)
        parent = by_longname.get(parent_name)
        if parent is None:
            break
        label = SCOPE_PUNCTUATION.get(parent.scope or "", "") + parent.name
        ancestors.insert(0, registry.linkto(parent.longname, label, css_class))
        parent_name = parent.memberof

    if ancestors:
        ancestors[-1] += SCOPE_PUNCTUATION.get(symbol.scope or "", "")
    return ancestors


def add_ancestors(symbols: Sequence[Symbol], registry: LinkRegistry) -> None:
    by_longname: dict[str, Symbol] = {}
    for symbol in symbols:
        by_longname.setdefault(symbol.longname, symbol)
    for symbol in symbols:
        symbol.ancestors = get_ancestor_links(by_longname, symbol, registry)


def normalize_constants(symbols: Sequence[Symbol]) -> list[Symbol]:
    """Return the symbol list with every constant re-kinded as a member.

    Must run after signature synthesis so the constant badge is kept.
    """
    normalized: list[Symbol] = []
    for symbol in symbols:
        if symbol.kind == "constant":
            data = symbol.model_dump(by_alias=True)
            data["kind"] = "member"
            symbol = MemberSymbol.model_validate(data)
        normalized.append(symbol)
    return normalized


__all__ = [
    "add_ancestors",
    "assign_ids",
    "decorate_examples",
    "decorate_see",
    "get_ancestor_links",
    "hash_to_link",
    "normalize_constants",
    "split_example",
]
