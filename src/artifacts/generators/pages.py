"""Container, global and index page generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote

from artifacts.utils import _write_text
from links.inline import resolve_links
from links.registry import GLOBAL

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from artifacts.models.artifacts.members import MemberMap
    from artifacts.models.artifacts.symbols import Symbol
    from artifacts.render import Renderer
    from links.registry import LinkRegistry

logger = logging.getLogger(__name__)

# Kinds with a page of their own, in title precedence order.
PAGE_KINDS = (
    ("module", "Module"),
    ("class", "Class"),
    ("namespace", "Namespace"),
    ("mixin", "Mixin"),
    ("external", "External"),
    ("interface", "Interface"),
)

# Children listed as links to their own pages.
_LINK_SECTIONS = (
    ("class", "Classes"),
    ("interface", "Interfaces"),
    ("mixin", "Mixins"),
    ("namespace", "Namespaces"),
)

# Children documented in full on the parent's page.
_ENTRY_SECTIONS = (
    ("member", "Members"),
    ("function", "Methods"),
    ("typedef", "Type Definitions"),
    ("event", "Events"),
)

_HOME_CATEGORIES = (
    ("modules", "Modules"),
    ("classes", "Classes"),
    ("namespaces", "Namespaces"),
    ("mixins", "Mixins"),
    ("interfaces", "Interfaces"),
    ("externals", "Externals"),
)


@dataclass
class PageSections:
    """Children of one page, grouped under their headings."""

    links: list[tuple[str, list[Symbol]]] = field(default_factory=list)
    entries: list[tuple[str, list[Symbol]]] = field(default_factory=list)


def page_filename(url: str) -> str:
    """Filename part of a registry url."""
    return unquote(url.split("#", 1)[0])


def group_children(children: Sequence[Symbol]) -> PageSections:
    sections = PageSections()
    for kind, heading in _LINK_SECTIONS:
        items = [child for child in children if child.kind == kind]
        if items:
            sections.links.append((heading, items))
    for kind, heading in _ENTRY_SECTIONS:
        items = [child for child in children if child.kind == kind]
        if items:
            sections.entries.append((heading, items))
    return sections


class PagesGenerator:
    """Generates one HTML page per container longname, plus global and index."""

    def __init__(
        self,
        renderer: Renderer,
        registry: LinkRegistry,
        nav_html: str,
    ) -> None:
        self.renderer = renderer
        self.registry = registry
        self.nav_html = nav_html

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "pages"

    def _write(self, out_dir: Path, filename: str, html: str) -> Path:
        path = out_dir / filename
        _write_text(path, resolve_links(html, self.registry))
        return path

    def generate(
        self,
        root: Path,
        out_dir: Path,
        **kwargs: Any,
    ) -> tuple[list[str], dict[str, Any]]:
        """Generate container, global and index pages."""
        symbols: Sequence[Symbol] = kwargs["symbols"]
        members: MemberMap = kwargs["members"]

        page_kinds = dict(PAGE_KINDS)
        children: dict[str | None, list[Symbol]] = {}
        containers: dict[str, list[Symbol]] = {}
        for symbol in symbols:
            children.setdefault(symbol.memberof, []).append(symbol)
            if symbol.kind in page_kinds:
                containers.setdefault(symbol.longname, []).append(symbol)

        written: list[Path] = []
        for longname in self.registry.longnames():
            docs = containers.get(longname, [])
            if not docs:
                continue
            label = next(
                label for kind, label in PAGE_KINDS if any(d.kind == kind for d in docs)
            )
            html = self.renderer.render(
                "container.html",
                title=f"{label}: {docs[0].name}",
                nav=self.nav_html,
                docs=docs,
                sections={longname: group_children(children.get(longname, []))},
            )
            written.append(
                self._write(out_dir, page_filename(self.registry.require(longname)), html)
            )

        if members.globals:
            html = self.renderer.render(
                "container.html",
                title="Global",
                nav=self.nav_html,
                docs=[],
                sections={None: group_children(members.globals)},
            )
            written.append(
                self._write(out_dir, page_filename(self.registry.require(GLOBAL)), html)
            )

        categories = [
            (heading, getattr(members, category))
            for category, heading in _HOME_CATEGORIES
            if getattr(members, category)
        ]
        html = self.renderer.render(
            "home.html",
            title="Documentation",
            nav=self.nav_html,
            categories=categories,
        )
        written.append(self._write(out_dir, self.registry.index_url, html))

        logger.debug("wrote %d pages", len(written))
        return [str(path) for path in written], {"page_count": len(written)}


__all__ = ["PAGE_KINDS", "PageSections", "PagesGenerator", "group_children", "page_filename"]
