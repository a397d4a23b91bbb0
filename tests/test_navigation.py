from __future__ import annotations

from typing import Any

from artifacts.models.artifacts.symbols import SYMBOL_ADAPTER, Symbol
from artifacts.models.artifacts.tutorials import Tutorial
from links.registry import LinkRegistry
from transform.members import attach_module_symbols, get_members
from transform.navigation import build_nav, build_nav_html


def _symbol(**fields: Any) -> Symbol:
    fields.setdefault("description", "Documented.")
    return SYMBOL_ADAPTER.validate_python(fields)


def _registry(
    symbols: list[Symbol], tutorials: list[Tutorial] | None = None
) -> LinkRegistry:
    registry = LinkRegistry()
    for symbol in symbols:
        registry.register(symbol.longname, registry.create_link(symbol))
    for tutorial in tutorials or []:
        registry.register_tutorial(tutorial.name)
    registry.freeze()
    return registry


def test_category_order_and_empty_categories_omitted() -> None:
    symbols = [
        _symbol(kind="interface", name="Shape", longname="Shape"),
        _symbol(kind="class", name="Foo", longname="Foo"),
        _symbol(kind="module", name="util", longname="module:util"),
        _symbol(kind="namespace", name="ns", longname="ns"),
    ]
    tutorials = [Tutorial(name="intro", title="Introduction")]
    registry = _registry(symbols, tutorials)

    nav = build_nav(get_members(symbols, tutorials), registry)

    assert [node.id for node in nav] == [
        "home",
        "modules",
        "classes",
        "namespaces",
        "tutorials",
        "interfaces",
    ]
    assert nav[0].anchor == '<a href="index.html">Home</a>'
    assert nav[1].items[0].anchor == '<a href="module-util.html">util</a>'
    assert nav[4].items[0].anchor == '<a href="tutorial-intro.html">Introduction</a>'


def test_longname_listed_once_across_categories() -> None:
    symbols = [
        _symbol(kind="module", name="dup", longname="dup"),
        _symbol(kind="class", name="dup", longname="dup"),
        _symbol(kind="class", name="Other", longname="Other"),
        _symbol(kind="class", name="Other", longname="Other"),
    ]
    registry = _registry(symbols)

    nav = build_nav(get_members(symbols), registry)

    ids = [item.id for node in nav for item in node.items]
    assert ids == ["dup", "Other"]
    assert [node.id for node in nav] == ["home", "modules", "classes"]


def test_use_longname_in_nav_strips_namespace_prefix() -> None:
    symbols = [
        _symbol(
            kind="event",
            name="change",
            longname="module:ui~event:change",
            memberof="module:ui",
            scope="inner",
        ),
    ]
    registry = _registry(symbols)

    nav = build_nav(get_members(symbols), registry, use_longname=True)

    assert nav[1].id == "events"
    assert nav[1].items[0].anchor.endswith(">ui~change</a>")


def test_externals_lose_quotes() -> None:
    symbols = [_symbol(kind="external", name='"jquery.fn"', longname='external:"jquery.fn"')]
    registry = _registry(symbols)

    nav = build_nav(get_members(symbols), registry)

    assert nav[1].id == "externals"
    assert nav[1].items[0].anchor.endswith(">jquery.fn</a>")


def test_globals_listed_without_typedefs() -> None:
    symbols = [
        _symbol(kind="function", name="helper", longname="helper"),
        _symbol(kind="typedef", name="Options", longname="Options"),
    ]
    registry = _registry(symbols)

    nav = build_nav(get_members(symbols), registry)

    glob = nav[-1]
    assert glob.id == "global"
    assert glob.anchor == "Global"
    assert [item.id for item in glob.items] == ["helper"]
    assert glob.items[0].anchor == '<a href="global.html#helper">helper</a>'


def test_only_typedef_globals_link_heading_to_global_page() -> None:
    symbols = [_symbol(kind="typedef", name="Options", longname="Options")]
    registry = _registry(symbols)

    nav = build_nav(get_members(symbols), registry)

    assert nav[-1].anchor == '<a href="global.html">Global</a>'
    assert nav[-1].items == []


def test_module_exports_are_not_globals_and_attach_to_module() -> None:
    module = _symbol(kind="module", name="util", longname="module:util")
    exported = _symbol(kind="function", name="module:util", longname="module:util")
    undocumented = _symbol(
        kind="class", name="module:util", longname="module:util", description=None
    )
    symbols = [module, exported, undocumented]

    members = get_members(symbols)
    attach_module_symbols(symbols, [module])

    assert members.globals == []
    assert [s.name for s in module.modules] == ['(require("util"))', '(require("util"))']
    assert exported.name == "module:util"


def test_nav_html_rendering() -> None:
    symbols = [
        _symbol(kind="class", name="Foo", longname="Foo"),
        _symbol(kind="typedef", name="Options", longname="Options"),
    ]
    registry = _registry(symbols)

    html = build_nav_html(build_nav(get_members(symbols), registry))

    assert html == (
        '<h2><a href="index.html">Home</a></h2>'
        '<h3>Classes</h3><ul><li><a href="Foo.html">Foo</a></li></ul>'
        '<h3><a href="global.html">Global</a></h3>'
    )
