"""Pretty-printed source listing pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from artifacts.generators.pages import page_filename
from artifacts.utils import _write_text

if TYPE_CHECKING:
    from artifacts.render import Renderer
    from links.registry import LinkRegistry
    from transform.sources import SourceCatalog, SourceFile

logger = logging.getLogger(__name__)

# Anchors are "line-<n>", matching the source links on symbol pages.
LINE_ANCHOR_PREFIX = "line"


def highlight_source(filename: str, code: str) -> str:
    try:
        lexer = get_lexer_for_filename(filename, code)
    except ClassNotFound:
        lexer = TextLexer()
    formatter = HtmlFormatter(
        linenos="table",
        lineanchors=LINE_ANCHOR_PREFIX,
        anchorlinenos=True,
        cssclass="highlight",
    )
    return highlight(code, lexer, formatter)


def highlight_css() -> str:
    return HtmlFormatter(cssclass="highlight").get_style_defs(".highlight")


class SourcesGenerator:
    """Generates one highlighted listing page per cataloged source file."""

    def __init__(self, renderer: Renderer, registry: LinkRegistry, nav_html: str) -> None:
        self.renderer = renderer
        self.registry = registry
        self.nav_html = nav_html

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "sources"

    def _read(self, root: Path, source_file: SourceFile, encoding: str) -> str | None:
        path = Path(source_file.resolved)
        if not path.is_absolute():
            path = root / path
        try:
            return path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error while generating source file %s: %s", path, exc)
            return None

    def generate(
        self,
        root: Path,
        out_dir: Path,
        **kwargs: Any,
    ) -> tuple[list[str], dict[str, Any]]:
        """Generate source pages; unreadable files are logged and skipped."""
        catalog: SourceCatalog = kwargs["catalog"]
        encoding: str = kwargs.get("encoding", "utf-8")

        written: list[str] = []
        skipped = 0
        for resolved in catalog.paths:
            source_file = catalog.files[resolved]
            shortened = source_file.shortened or resolved
            url = self.registry.resolve(shortened)
            if url is None:
                continue

            code = self._read(root, source_file, encoding)
            if code is None:
                skipped += 1
                continue

            html = self.renderer.render(
                "source.html",
                title=f"Source: {shortened}",
                nav=self.nav_html,
                code=highlight_source(shortened, code),
            )
            path = out_dir / page_filename(url)
            _write_text(path, html)
            written.append(str(path))

        _write_text(out_dir / "styles" / "highlight.css", highlight_css())
        return written, {"source_count": len(written), "skipped_sources": skipped}


__all__ = ["SourcesGenerator", "highlight_css", "highlight_source"]
