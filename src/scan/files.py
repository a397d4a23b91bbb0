"""File scanning utilities for static asset copying."""

from __future__ import annotations

from fnmatch import fnmatch
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


def _should_include_file(
    path: Path,
    directory: Path,
    gitignore_matches: Callable[[str], bool] | None,
    exclude_patterns: list[str] | None,
) -> bool:
    """Check if a file should be included based on all filtering rules."""
    if not path.is_file() or path.is_symlink():
        return False

    if not _is_within_root(path, directory):
        return False

    try:
        rel_path = path.relative_to(directory)
    except ValueError:
        return False

    rel_path_str = rel_path.as_posix()

    if gitignore_matches is not None and gitignore_matches(str(path)):
        return False

    has_excluded_match = exclude_patterns and any(
        fnmatch(rel_path_str, pat) or fnmatch(path.name, pat)
        for pat in exclude_patterns
    )
    return not has_excluded_match


def _is_within_root(path: Path, root: Path) -> bool:
    """Return True when the resolved path stays within the resolved root."""
    try:
        root_resolved = root.resolve()
        path_resolved = path.resolve()
    except OSError:
        return False

    try:
        path_resolved.relative_to(root_resolved)
    except ValueError:
        return False

    return True


def build_gitignore_matcher(root: Path) -> Callable[[str], bool] | None:
    """Matcher for the project's top-level ``.gitignore``, if there is one."""
    gitignore_path = root / ".gitignore"
    if gitignore_path.is_file():
        return cast("Callable[[str], bool]", parse_gitignore(gitignore_path))
    return None


def find_static_files(
    directory: Path,
    *,
    exclude_patterns: list[str] | None = None,
    gitignore_matches: Callable[[str], bool] | None = None,
) -> Iterator[Path]:
    """Find the files to copy from a static directory.

    Args:
        directory: Directory to search
        exclude_patterns: Optional list of fnmatch patterns; files whose
            relative path or name matches any pattern are excluded
        gitignore_matches: Optional matcher; ignored files are excluded

    Yields:
        Path objects for each file found, sorted lexicographically by
        relative path for deterministic ordering.
    """
    matched_files = [
        path
        for path in directory.rglob("*")
        if _should_include_file(path, directory, gitignore_matches, exclude_patterns)
    ]

    matched_files.sort(key=lambda p: p.relative_to(directory).as_posix())

    yield from matched_files


__all__ = ["_should_include_file", "build_gitignore_matcher", "find_static_files"]
