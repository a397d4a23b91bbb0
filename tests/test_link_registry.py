from __future__ import annotations

from typing import Any
from urllib.parse import unquote

import pytest

from artifacts.models.artifacts.symbols import SYMBOL_ADAPTER, Symbol
from links.registry import LinkRegistry, LinkResolutionError, RegistryFrozenError


def _symbol(**fields: Any) -> Symbol:
    return SYMBOL_ADAPTER.validate_python(fields)


def test_reserved_names_claimed_up_front() -> None:
    registry = LinkRegistry()

    assert registry.index_url == "index.html"
    assert registry.global_url == "global.html"
    assert registry.unique_filename("index") == "index_1.html"
    assert registry.unique_filename("Global") == "Global_1.html"


def test_collisions_resolved_case_insensitively() -> None:
    registry = LinkRegistry()

    assert registry.unique_filename("Foo") == "Foo.html"
    assert registry.unique_filename("foo") == "foo_1.html"
    assert registry.unique_filename("FOO") == "FOO_2.html"


def test_unsafe_characters_sanitized() -> None:
    registry = LinkRegistry()

    assert registry.unique_filename("module:foo/bar") == "module-foo_bar.html"
    assert registry.unique_filename("Foo~inner") == "Foo-inner.html"
    assert registry.unique_filename("Foo#bar") == "Foo_bar.html"


def test_assign_is_idempotent() -> None:
    registry = LinkRegistry()

    first = registry.assign("Foo")
    second = registry.assign("Foo")

    assert first == second == "Foo.html"


def test_distinct_longnames_get_distinct_identifiers() -> None:
    registry = LinkRegistry()
    longnames = ["Foo", "foo", "module:foo", "Foo#bar", "Foo.bar", "Foo~bar", "global"]

    urls = {registry.assign(longname) for longname in longnames}

    assert len(urls) == len(longnames)


def test_create_link_containers_get_own_page() -> None:
    registry = LinkRegistry()

    cls = _symbol(kind="class", name="Foo", longname="Foo")
    module = _symbol(kind="module", name="foo/bar", longname="module:foo/bar")

    assert registry.create_link(cls) == "Foo.html"
    assert registry.create_link(module) == "module-foo_bar.html"


def test_create_link_members_use_parent_page_fragment() -> None:
    registry = LinkRegistry()

    method = _symbol(
        kind="function", name="bar", longname="Foo#bar", memberof="Foo", scope="instance"
    )
    static = _symbol(
        kind="member", name="qux", longname="Foo.qux", memberof="Foo", scope="static"
    )
    inner = _symbol(
        kind="function", name="zap", longname="Foo~zap", memberof="Foo", scope="inner"
    )
    glob = _symbol(kind="function", name="helper", longname="helper", scope="global")

    assert registry.create_link(method) == "Foo.html#bar"
    assert registry.create_link(static) == "Foo.html#.qux"
    assert registry.create_link(inner) == "Foo.html#~zap"
    assert registry.create_link(glob) == "global.html#helper"


def test_create_link_event_fragment_keeps_namespace() -> None:
    registry = LinkRegistry()
    event = _symbol(
        kind="event",
        name="change",
        longname="Foo#event:change",
        memberof="Foo",
        scope="instance",
    )

    assert registry.create_link(event) == "Foo.html#event:change"


def test_module_exports_get_own_page() -> None:
    registry = LinkRegistry()
    exported = _symbol(kind="function", name="module:util", longname="module:util")

    assert registry.create_link(exported) == "module-util.html"


def test_frozen_registry_rejects_allocation() -> None:
    registry = LinkRegistry()
    registry.register("Foo", registry.assign("Foo"))
    registry.freeze()

    assert registry.frozen
    assert registry.resolve("Foo") == "Foo.html"
    with pytest.raises(RegistryFrozenError):
        registry.unique_filename("Bar")
    with pytest.raises(RegistryFrozenError):
        registry.register("Bar", "Bar.html")


def test_require_missing_longname_raises() -> None:
    registry = LinkRegistry()

    with pytest.raises(LinkResolutionError, match="Missing"):
        registry.require("Missing")


def test_linkto_escapes_and_falls_back_to_text() -> None:
    registry = LinkRegistry()
    registry.register("Foo", "Foo.html")

    assert registry.linkto("Foo") == '<a href="Foo.html">Foo</a>'
    assert registry.linkto("Foo", "<Foo>") == '<a href="Foo.html">&lt;Foo&gt;</a>'
    assert registry.linkto("Unknown") == "Unknown"
    assert (
        registry.linkto("Foo", css_class="x", fragment="y")
        == '<a href="Foo.html#y" class="x">Foo</a>'
    )


def test_linkto_type_application_links_components() -> None:
    registry = LinkRegistry()
    registry.register("Foo", "Foo.html")

    assert (
        registry.linkto("Array.<Foo>")
        == 'Array.&lt;<a href="Foo.html">Foo</a>&gt;'
    )


def test_linkto_external_url() -> None:
    registry = LinkRegistry()

    assert (
        registry.linkto("https://example.com", "site")
        == '<a href="https://example.com">site</a>'
    )


def test_tutorial_links() -> None:
    registry = LinkRegistry()
    url = registry.register_tutorial("intro")

    assert url == "tutorial-intro.html"
    assert registry.register_tutorial("intro") == url
    assert registry.tutorial_link("intro", "Intro") == '<a href="tutorial-intro.html">Intro</a>'
    assert registry.tutorial_link("nope") == '<em class="disabled">Tutorial: nope</em>'


def test_non_ascii_container_members_link_to_written_page() -> None:
    registry = LinkRegistry()
    cls = _symbol(kind="class", name="Café", longname="Café")
    method = _symbol(
        kind="function",
        name="brew",
        longname="Café#brew",
        memberof="Café",
        scope="instance",
    )
    for symbol in (cls, method):
        registry.register(symbol.longname, registry.create_link(symbol))

    assert registry.assign("Café") == "Café.html"
    assert registry.resolve("Café") == "Caf%C3%A9.html"
    assert registry.resolve("Café#brew") == "Caf%C3%A9.html#brew"
    page = registry.resolve("Café#brew").split("#", 1)[0]
    assert unquote(page) == registry.assign("Café")


def test_member_before_container_shares_page() -> None:
    registry = LinkRegistry()
    method = _symbol(
        kind="function", name="go", longname="My Thing#go", memberof="My Thing"
    )
    cls = _symbol(kind="class", name="My Thing", longname="My Thing")

    assert registry.create_link(method) == "My%20Thing.html#go"
    assert registry.create_link(cls) == "My%20Thing.html"
    assert registry.page_url("My Thing") == "My%20Thing.html"
