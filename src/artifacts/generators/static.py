"""Static asset copying."""

from __future__ import annotations

import logging
import shutil
from fnmatch import fnmatch
from typing import TYPE_CHECKING, Any

from scan.files import build_gitignore_matcher, find_static_files

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import StaticFilesConfig

logger = logging.getLogger(__name__)


def _copy(source: Path, destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)


class StaticGenerator:
    """Copies the template's ``static/`` directory and user static files."""

    def __init__(self, template_static_dir: Path, static_files: StaticFilesConfig) -> None:
        self.template_static_dir = template_static_dir
        self.static_files = static_files

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "static"

    def generate(
        self,
        root: Path,
        out_dir: Path,
        **kwargs: Any,
    ) -> tuple[list[str], dict[str, Any]]:
        """Copy static files into ``out_dir``, preserving relative layout."""
        exclude = self.static_files.exclude
        written: list[str] = []

        if self.template_static_dir.is_dir():
            for path in find_static_files(self.template_static_dir):
                target = out_dir / path.relative_to(self.template_static_dir)
                _copy(path, target)
                written.append(str(target))

        gitignore_matches = build_gitignore_matcher(root)
        for include in self.static_files.include:
            source = root / include
            if source.is_file():
                if any(fnmatch(source.name, pat) for pat in exclude):
                    continue
                target = out_dir / source.name
                _copy(source, target)
                written.append(str(target))
            elif source.is_dir():
                for path in find_static_files(
                    source,
                    exclude_patterns=exclude,
                    gitignore_matches=gitignore_matches,
                ):
                    target = out_dir / path.relative_to(source)
                    _copy(path, target)
                    written.append(str(target))
            else:
                logger.warning("static file path %s does not exist", source)

        return written, {"static_count": len(written)}


__all__ = ["StaticGenerator"]
