"""Shared utilities for docgraft."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from markupsafe import escape

if TYPE_CHECKING:
    from artifacts.models.artifacts.symbols import Symbol

_NAMESPACE_PREFIX = re.compile(r"\b(module|event):")


def htmlsafe(text: str | None) -> str:
    """Escape raw text for embedding in generated markup."""
    return str(escape(text or ""))


def strip_namespace(name: str) -> str:
    """Drop ``module:``/``event:`` prefixes from a display name.

    Examples:
        >>> strip_namespace("module:foo/bar")
        'foo/bar'
        >>> strip_namespace("Foo#event:change")
        'Foo#change'
    """
    return _NAMESPACE_PREFIX.sub("", name)


def strip_quotes(name: str) -> str:
    """Remove one pair of surrounding double quotes (``"jquery.fn"``)."""
    if name.startswith('"'):
        name = name[1:]
    if name.endswith('"'):
        name = name[:-1]
    return name


def path_from_symbol(symbol: Symbol) -> str | None:
    """Return the declaring source path of a symbol, if it has one.

    ``meta.path`` is joined with ``meta.filename``; parsers that could not
    determine a directory report it as absent or as the literal ``"null"``,
    in which case the bare filename is used.
    """
    meta = symbol.meta
    if meta is None:
        return None
    if meta.path and meta.path != "null":
        return f"{meta.path.rstrip('/')}/{meta.filename}"
    return meta.filename or None


def is_module_exports(symbol: Symbol) -> bool:
    """True for ``module.exports = function/class`` style symbols."""
    return (
        bool(symbol.longname)
        and symbol.longname == symbol.name
        and symbol.longname.startswith("module:")
        and symbol.kind != "module"
    )
