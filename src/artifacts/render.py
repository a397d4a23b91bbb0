"""Jinja2 template backend for the HTML pages."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
LAYOUT_TEMPLATE = "layout.html"


class Renderer:
    """Renders a page template and wraps the result in the layout.

    Values handed to the templates are already escaped where needed (link
    anchors, signatures, descriptions are HTML), so autoescaping is off.
    ``helpers`` become template globals, visible to imported macros too.
    """

    def __init__(
        self,
        template_dir: Path | None = None,
        layout_file: Path | None = None,
        helpers: dict[str, Callable[..., str]] | None = None,
    ) -> None:
        self.template_dir = template_dir or DEFAULT_TEMPLATE_DIR

        search_path = [str(self.template_dir)]
        self.layout_name = LAYOUT_TEMPLATE
        if layout_file is not None:
            search_path.insert(0, str(layout_file.parent))
            self.layout_name = layout_file.name
        if self.template_dir != DEFAULT_TEMPLATE_DIR:
            # Custom themes may override only some templates.
            search_path.append(str(DEFAULT_TEMPLATE_DIR))

        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.globals.update(helpers or {})

    @property
    def static_dir(self) -> Path:
        return self.template_dir / "static"

    def partial(self, template_name: str, **context: Any) -> str:
        return self.env.get_template(template_name).render(**context)

    def render(self, template_name: str, *, title: str, nav: str, **context: Any) -> str:
        """Render ``template_name`` and place it in the layout."""
        content = self.partial(template_name, title=title, **context)
        return self.env.get_template(self.layout_name).render(
            title=title, nav=nav, content=content
        )


__all__ = ["DEFAULT_TEMPLATE_DIR", "Renderer"]
