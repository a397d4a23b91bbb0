"""Sidebar navigation tree assembly."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.artifacts.navigation import NavNode
from links.registry import GLOBAL
from utils import htmlsafe, strip_namespace, strip_quotes

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from artifacts.models.artifacts.members import MemberMap
    from artifacts.models.artifacts.symbols import Symbol
    from artifacts.models.artifacts.tutorials import Tutorial
    from links.registry import LinkRegistry

    LinkFn = Callable[[str, str], str]

# (member map attribute, heading) in sidebar order; tutorials are handled
# separately because their names live in a namespace of their own.
_SYMBOL_CATEGORIES_BEFORE_TUTORIALS = (
    ("modules", "Modules"),
    ("externals", "Externals"),
    ("classes", "Classes"),
    ("events", "Events"),
    ("namespaces", "Namespaces"),
    ("mixins", "Mixins"),
)

_SYMBOL_CATEGORIES_AFTER_TUTORIALS = (("interfaces", "Interfaces"),)


def _heading(category: str, heading: str, items: list[NavNode]) -> NavNode | None:
    if not items:
        return None
    return NavNode(id=category, anchor=htmlsafe(heading), items=items)


def build_member_nav(
    symbols: Sequence[Symbol],
    seen: set[str],
    link: LinkFn,
    *,
    use_longname: bool = False,
) -> list[NavNode]:
    """One item per symbol whose longname has not been seen yet."""
    items: list[NavNode] = []
    for symbol in symbols:
        if symbol.longname in seen:
            continue
        seen.add(symbol.longname)
        display_name = symbol.longname if use_longname else symbol.name
        items.append(
            NavNode(
                id=symbol.longname,
                anchor=link(symbol.longname, strip_namespace(display_name)),
            )
        )
    return items


def build_tutorial_nav(
    tutorials: Sequence[Tutorial], seen: set[str], registry: LinkRegistry
) -> list[NavNode]:
    items: list[NavNode] = []
    for tutorial in tutorials:
        if tutorial.name in seen:
            continue
        seen.add(tutorial.name)
        items.append(
            NavNode(
                id=tutorial.name,
                anchor=registry.tutorial_link(tutorial.name, tutorial.title),
            )
        )
    return items


def build_global_nav(
    symbols: Sequence[Symbol], seen: set[str], registry: LinkRegistry
) -> NavNode | None:
    """Globals heading: a list of globals, or a link to the global page.

    Typedefs never get their own entry; when nothing else is left the
    heading itself links to the reserved global page.
    """
    if not symbols:
        return None

    items: list[NavNode] = []
    for symbol in symbols:
        if symbol.kind != "typedef" and symbol.longname not in seen:
            items.append(
                NavNode(
                    id=symbol.longname,
                    anchor=registry.linkto(symbol.longname, symbol.name),
                )
            )
        seen.add(symbol.longname)

    if items:
        return NavNode(id=GLOBAL, anchor="Global", items=items)
    return NavNode(id=GLOBAL, anchor=registry.linkto(GLOBAL, "Global"))


def build_nav(
    members: MemberMap,
    registry: LinkRegistry,
    *,
    use_longname: bool = False,
) -> list[NavNode]:
    """Assemble the sidebar tree.

    Order is fixed: Home, Modules, Externals, Classes, Events, Namespaces,
    Mixins, Tutorials, Interfaces, Global. Categories left empty after
    deduplication are omitted.
    """
    seen: set[str] = set()
    seen_tutorials: set[str] = set()

    def link(longname: str, text: str) -> str:
        return registry.linkto(longname, text)

    def link_external(longname: str, text: str) -> str:
        return registry.linkto(longname, strip_quotes(text))

    nav: list[NavNode] = [
        NavNode(id="home", anchor=f'<a href="{htmlsafe(registry.index_url)}">Home</a>')
    ]

    def add_categories(categories: tuple[tuple[str, str], ...]) -> None:
        for category, heading in categories:
            link_fn = link_external if category == "externals" else link
            items = build_member_nav(
                getattr(members, category), seen, link_fn, use_longname=use_longname
            )
            node = _heading(category, heading, items)
            if node is not None:
                nav.append(node)

    add_categories(_SYMBOL_CATEGORIES_BEFORE_TUTORIALS)

    tutorials = _heading(
        "tutorials",
        "Tutorials",
        build_tutorial_nav(members.tutorials, seen_tutorials, registry),
    )
    if tutorials is not None:
        nav.append(tutorials)

    add_categories(_SYMBOL_CATEGORIES_AFTER_TUTORIALS)

    global_node = build_global_nav(members.globals, seen, registry)
    if global_node is not None:
        nav.append(global_node)

    return nav


def build_nav_html(nav: Sequence[NavNode]) -> str:
    """Render the sidebar tree as HTML.

    The home node becomes an ``<h2>``; every other node a ``<h3>`` heading
    followed by a list of its items, if it has any.
    """
    parts: list[str] = []
    for node in nav:
        if node.id == "home":
            parts.append(f"<h2>{node.anchor}</h2>")
            continue
        parts.append(f"<h3>{node.anchor}</h3>")
        if node.items:
            items = "".join(f"<li>{item.anchor}</li>" for item in node.items)
            parts.append(f"<ul>{items}</ul>")
    return "".join(parts)


__all__ = [
    "build_global_nav",
    "build_member_nav",
    "build_nav",
    "build_nav_html",
    "build_tutorial_nav",
]
