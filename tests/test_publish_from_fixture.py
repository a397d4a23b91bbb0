from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path

import pytest

from artifacts.write import publish
from contract.artifacts import (
    DIST_DIR,
    DOCS_JSON,
    DOCS_RAW_JSON,
    MEMBERS_JSON,
    NAV_JSON,
    TREE_JSON,
)
from rules.config import PublishConfig, TemplatesConfig

_FIXTURE = Path(__file__).parent / "fixtures" / "project"


def _copy_fixture_project(root: Path) -> Path:
    shutil.copytree(_FIXTURE, root)
    return root / "doclets.json"


def _read_json(path: Path) -> object:
    return json.loads(path.read_text(encoding="utf-8"))


def _publish(tmp_path: Path, config: PublishConfig | None = None) -> tuple[Path, dict[str, object]]:
    root = tmp_path / "project"
    input_path = _copy_fixture_project(root)
    out_dir = tmp_path / "site"
    summary = publish(
        input_path=input_path,
        root=root,
        out_dir=out_dir,
        config=config or PublishConfig(tutorials="tutorials"),
    )
    return out_dir, summary


def test_publish_writes_snapshots_and_pages(tmp_path: Path) -> None:
    out_dir, summary = _publish(tmp_path)

    for name in (DOCS_RAW_JSON, DOCS_JSON, MEMBERS_JSON, NAV_JSON, TREE_JSON):
        assert (out_dir / DIST_DIR / name).is_file()

    for page in (
        "index.html",
        "global.html",
        "helpers.html",
        "module-widgets.html",
        "module-widgets-Widget.html",
        "tutorial-intro.html",
        "widget.js.html",
        "util_helpers.js.html",
        "styles/docgraft.css",
        "styles/highlight.css",
    ):
        assert (out_dir / page).is_file(), page

    assert summary["symbol_count"] == 9
    assert summary["page_count"] == 5
    assert summary["tutorial_count"] == 1
    assert summary["source_count"] == 2


def test_docs_snapshot_pruned_and_decorated(tmp_path: Path) -> None:
    out_dir, _ = _publish(tmp_path)

    raw = _read_json(out_dir / DIST_DIR / DOCS_RAW_JSON)
    docs = _read_json(out_dir / DIST_DIR / DOCS_JSON)
    assert isinstance(raw, list)
    assert isinstance(docs, list)
    by_longname = {doc["longname"]: doc for doc in docs}

    assert len(raw) == 13
    assert "module:widgets~Widget#_secret" not in by_longname
    assert "ignored" not in by_longname
    assert "<anonymous>~tmp" not in by_longname

    assert by_longname["VERSION"]["kind"] == "member"
    assert "(constant)" in by_longname["VERSION"]["attribs"]

    event = by_longname["module:widgets~Widget#event:render"]
    assert event["listeners"] == ["module:widgets~Widget#destroy"]

    render = by_longname["module:widgets~Widget#render"]
    assert render["id"] == "render"
    assert render["meta"]["shortpath"] == "widget.js"
    assert render["examples"] == [{"caption": "Render", "code": "widget.render('x');"}]
    assert render["see"] == [
        '<a href="module-widgets-Widget.html#destroy">#destroy</a>'
    ]
    assert 'render(a, b<span class="signature-attributes">opt</span>)' in render["signature"]

    helpers = by_longname["helpers.debounce"]
    assert helpers["meta"]["shortpath"] == "util/helpers.js"


def test_members_nav_and_tree_snapshots(tmp_path: Path) -> None:
    out_dir, _ = _publish(tmp_path)

    members = _read_json(out_dir / DIST_DIR / MEMBERS_JSON)
    nav = _read_json(out_dir / DIST_DIR / NAV_JSON)
    tree = _read_json(out_dir / DIST_DIR / TREE_JSON)
    assert isinstance(members, dict)
    assert isinstance(nav, list)
    assert isinstance(tree, dict)

    assert [m["longname"] for m in members["globals"]] == ["Options", "VERSION"]
    assert [t["name"] for t in members["tutorials"]] == ["intro"]

    assert [node["id"] for node in nav] == [
        "home",
        "modules",
        "classes",
        "events",
        "namespaces",
        "tutorials",
        "global",
    ]
    assert [item["id"] for item in nav[-1]["items"]] == ["VERSION"]

    assert [ns["name"] for ns in tree["namespaces"]] == ["helpers"]
    assert [f["name"] for f in tree["namespaces"][0]["functions"]] == ["debounce"]
    assert [p["name"] for p in tree["properties"]] == ["VERSION"]


def test_pages_resolve_links_and_render_signatures(tmp_path: Path) -> None:
    out_dir, _ = _publish(tmp_path)

    helpers_page = (out_dir / "helpers.html").read_text(encoding="utf-8")
    assert "<title>Namespace: helpers</title>" in helpers_page
    assert (
        '<a href="module-widgets-Widget.html">module:widgets~Widget</a>' in helpers_page
    )
    assert "{@link" not in helpers_page

    widget_page = (out_dir / "module-widgets-Widget.html").read_text(encoding="utf-8")
    assert "<title>Class: Widget</title>" in widget_page
    assert 'id="render"' in widget_page
    assert '<a href="widget.js.html#line-22">widget.js</a>, line 22' in widget_page

    tutorial_page = (out_dir / "tutorial-intro.html").read_text(encoding="utf-8")
    assert "<title>Tutorial: Introduction</title>" in tutorial_page
    assert "<h1>Getting started</h1>" in tutorial_page
    assert '<a href="module-widgets-Widget.html">' in tutorial_page

    source_page = (out_dir / "widget.js.html").read_text(encoding="utf-8")
    assert "<title>Source: widget.js</title>" in source_page
    assert 'id="line-22"' in source_page

    index_page = (out_dir / "index.html").read_text(encoding="utf-8")
    assert "<title>Documentation</title>" in index_page


def test_private_symbols_published_on_request(tmp_path: Path) -> None:
    out_dir, _ = _publish(
        tmp_path, PublishConfig(show_private=True, tutorials="tutorials")
    )

    docs = _read_json(out_dir / DIST_DIR / DOCS_JSON)
    assert isinstance(docs, list)
    assert "module:widgets~Widget#_secret" in {doc["longname"] for doc in docs}


def test_source_pages_can_be_disabled(tmp_path: Path) -> None:
    out_dir, summary = _publish(
        tmp_path,
        PublishConfig(templates=TemplatesConfig(output_source_files=False)),
    )

    assert not (out_dir / "widget.js.html").exists()
    assert "source_count" not in summary
    widget_page = (out_dir / "module-widgets-Widget.html").read_text(encoding="utf-8")
    assert "widget.js, line 22" in widget_page


def test_unreadable_source_is_logged_and_skipped(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    root = tmp_path / "project"
    input_path = _copy_fixture_project(root)
    (root / "src" / "lib" / "util" / "helpers.js").unlink()
    out_dir = tmp_path / "site"

    with caplog.at_level(logging.ERROR, logger="artifacts.generators.sources"):
        summary = publish(
            input_path=input_path,
            root=root,
            out_dir=out_dir,
            config=PublishConfig(),
        )

    assert summary["skipped_sources"] == 1
    assert not (out_dir / "util_helpers.js.html").exists()
    assert (out_dir / "widget.js.html").is_file()
    assert any("helpers.js" in record.getMessage() for record in caplog.records)


def test_console_destination_prints_and_writes_nothing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    root = tmp_path / "project"
    input_path = _copy_fixture_project(root)
    (root / "docgraft.toml").write_text('destination = "console"\n', encoding="utf-8")

    summary = publish(input_path=input_path, root=root)

    assert summary["artifacts"] == []
    assert not (root / "console").exists()
    docs = json.loads(capsys.readouterr().out)
    assert "VERSION" in {doc["longname"] for doc in docs}


def test_default_destination_from_config(tmp_path: Path) -> None:
    root = tmp_path / "project"
    input_path = _copy_fixture_project(root)

    publish(input_path=input_path, root=root)

    assert (root / "docs" / DIST_DIR / DOCS_JSON).is_file()
    assert (root / "docs" / "index.html").is_file()
