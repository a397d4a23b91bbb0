"""Tutorial page generator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import markdown

from artifacts.generators.pages import page_filename
from artifacts.utils import _write_text
from links.inline import resolve_links

if TYPE_CHECKING:
    from pathlib import Path

    from artifacts.models.artifacts.tutorials import Tutorial, TutorialRoot
    from artifacts.render import Renderer
    from links.registry import LinkRegistry

_MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]


def tutorial_html(tutorial: Tutorial) -> str:
    """Tutorial content as HTML; markdown sources are converted."""
    if tutorial.type == "markdown":
        return markdown.markdown(tutorial.content, extensions=_MARKDOWN_EXTENSIONS)
    return tutorial.content


class TutorialsGenerator:
    """Generates one page per tutorial, children included."""

    def __init__(self, renderer: Renderer, registry: LinkRegistry, nav_html: str) -> None:
        self.renderer = renderer
        self.registry = registry
        self.nav_html = nav_html

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "tutorials"

    def generate(
        self,
        root: Path,
        out_dir: Path,
        **kwargs: Any,
    ) -> tuple[list[str], dict[str, Any]]:
        """Generate tutorial pages."""
        tutorials: TutorialRoot = kwargs["tutorials"]

        written: list[str] = []
        for tutorial in tutorials.walk():
            url = self.registry.tutorial_url(tutorial.name)
            if url is None:
                continue
            html = self.renderer.render(
                "tutorial.html",
                title=f"Tutorial: {tutorial.title}",
                nav=self.nav_html,
                header=tutorial.title,
                content=tutorial_html(tutorial),
                children=tutorial.children,
            )
            path = out_dir / page_filename(url)
            _write_text(path, resolve_links(html, self.registry))
            written.append(str(path))

        return written, {"tutorial_count": len(written)}


__all__ = ["TutorialsGenerator", "tutorial_html"]
