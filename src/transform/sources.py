"""Source file cataloging and path shortening."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from utils import path_from_symbol

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from artifacts.models.artifacts.symbols import Symbol


@dataclass
class SourceFile:
    """A declaring source file and its path relative to the common root."""

    resolved: str
    shortened: str | None = None


@dataclass
class SourceCatalog:
    paths: list[str] = field(default_factory=list)
    files: dict[str, SourceFile] = field(default_factory=dict)


def _normalize(path: str) -> str:
    return path.replace("\\", "/")


def catalog_sources(symbols: Iterable[Symbol]) -> SourceCatalog:
    """Collect the distinct source files referenced by ``symbols``.

    Paths are kept in first-seen order with separators normalized to
    forward slashes. Symbols without ``meta`` are skipped.
    """
    catalog = SourceCatalog()
    for symbol in symbols:
        source_path = path_from_symbol(symbol)
        if source_path is None:
            continue
        source_path = _normalize(source_path)
        if source_path not in catalog.files:
            catalog.files[source_path] = SourceFile(resolved=source_path)
            catalog.paths.append(source_path)
    return catalog


def common_prefix(paths: Sequence[str]) -> str:
    """Longest shared directory prefix, with a trailing slash.

    Only directory segments are compared, so a filename is never part of
    the prefix.

    Examples:
        >>> common_prefix(["/a/b/x.js", "/a/b/c/y.js"])
        '/a/b/'
        >>> common_prefix(["/a/b/x.js"])
        '/a/b/'
        >>> common_prefix(["x.js", "y.js"])
        ''
    """
    if not paths:
        return ""

    directories = [_normalize(path).split("/")[:-1] for path in paths]
    shared: list[str] = []
    for segments in zip(*directories):
        if any(segment != segments[0] for segment in segments[1:]):
            break
        shared.append(segments[0])

    if not shared:
        return ""
    return "/".join(shared) + "/"


def shorten_paths(catalog: SourceCatalog, prefix: str) -> SourceCatalog:
    """Set each file's ``shortened`` path by stripping ``prefix``."""
    for source_file in catalog.files.values():
        resolved = _normalize(source_file.resolved)
        if prefix and resolved.startswith(prefix):
            resolved = resolved[len(prefix) :]
        source_file.shortened = resolved
    return catalog


def apply_shortpaths(symbols: Iterable[Symbol], catalog: SourceCatalog) -> None:
    """Write each symbol's shortened source path onto ``meta.shortpath``."""
    for symbol in symbols:
        source_path = path_from_symbol(symbol)
        if source_path is None or symbol.meta is None:
            continue
        source_file = catalog.files.get(_normalize(source_path))
        if source_file is not None and source_file.shortened:
            symbol.meta.shortpath = source_file.shortened


def build_source_catalog(symbols: Sequence[Symbol]) -> SourceCatalog:
    """Catalog, shorten and annotate in one pass over the whole set."""
    catalog = catalog_sources(symbols)
    if catalog.paths:
        shorten_paths(catalog, common_prefix(catalog.paths))
    apply_shortpaths(symbols, catalog)
    return catalog


__all__ = [
    "SourceCatalog",
    "SourceFile",
    "apply_shortpaths",
    "build_source_catalog",
    "catalog_sources",
    "common_prefix",
    "shorten_paths",
]
