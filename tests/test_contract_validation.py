from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from contract.artifacts import (
    ARTIFACT_SPECS,
    DIST_DIR,
    DOCS_JSON,
    DOCS_RAW_JSON,
    MEMBERS_JSON,
    NAV_JSON,
    TREE_JSON,
)
from contract.validation import (
    ValidationMessage,
    ValidationResult,
    validate_artifacts,
)

_DOC = {
    "kind": "class",
    "name": "Foo",
    "longname": "Foo",
    "description": "A class.",
}


def _write(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def _write_valid_artifacts(d: Path) -> None:
    """Write minimal valid snapshots under d/dist."""
    dist = d / DIST_DIR
    _write(dist / DOCS_RAW_JSON, [_DOC, {"kind": "package", "longname": "package:x"}])
    _write(dist / DOCS_JSON, [_DOC])
    _write(dist / MEMBERS_JSON, {"classes": [_DOC], "tutorials": []})
    _write(
        dist / NAV_JSON,
        [
            {"id": "home", "anchor": '<a href="index.html">Home</a>'},
            {
                "id": "classes",
                "anchor": "Classes",
                "items": [{"id": "Foo", "anchor": '<a href="Foo.html">Foo</a>'}],
            },
        ],
    )
    _write(
        dist / TREE_JSON,
        {"classes": [{"name": "Foo", "constructor": {"name": "Foo"}}]},
    )


def _messages_contain(messages: list[ValidationMessage], needle: str) -> bool:
    """Return True when any validation message contains the given substring."""
    return any(needle in message.message for message in messages)


def test_validation_message_location_with_index() -> None:
    msg = ValidationMessage("docs", Path("docs.json"), "bad", index=3)
    assert msg.location() == "docs.json[3]"


def test_validation_message_location_without_index() -> None:
    msg = ValidationMessage("docs", Path("docs.json"), "bad")
    assert msg.location() == "docs.json"


def test_validation_message_to_dict() -> None:
    msg = ValidationMessage("docs", Path("docs.json"), "bad", index=1)
    assert msg.to_dict() == {
        "artifact": "docs",
        "path": "docs.json",
        "index": 1,
        "message": "bad",
    }


def test_validation_result_ok_when_no_errors() -> None:
    result = ValidationResult()
    result.warnings.append(ValidationMessage("docs", Path("docs.json"), "meh"))
    assert result.ok


def test_missing_directory(tmp_path: Path) -> None:
    result = validate_artifacts(tmp_path / "missing")
    assert not result.ok
    assert _messages_contain(result.errors, "does not exist")


def test_not_a_directory(tmp_path: Path) -> None:
    file_path = tmp_path / "file.txt"
    file_path.write_text("x", encoding="utf-8")

    result = validate_artifacts(file_path)

    assert _messages_contain(result.errors, "not a directory")


def test_missing_artifact_files(tmp_path: Path) -> None:
    result = validate_artifacts(tmp_path)

    assert len(result.errors) == len(ARTIFACT_SPECS)
    assert all(e.message == "Required artifact file is missing." for e in result.errors)


def test_valid_artifacts_pass(tmp_path: Path) -> None:
    _write_valid_artifacts(tmp_path)

    result = validate_artifacts(tmp_path)

    assert result.ok, [e.message for e in result.errors]
    assert result.warnings == []


def test_invalid_json(tmp_path: Path) -> None:
    _write_valid_artifacts(tmp_path)
    (tmp_path / DIST_DIR / NAV_JSON).write_text("[{", encoding="utf-8")

    result = validate_artifacts(tmp_path)

    assert _messages_contain(result.errors, "Invalid JSON")


def test_wrong_shape(tmp_path: Path) -> None:
    _write_valid_artifacts(tmp_path)
    _write(tmp_path / DIST_DIR / DOCS_JSON, {"not": "a list"})

    result = validate_artifacts(tmp_path)

    assert _messages_contain(result.errors, "Expected JSON array")


def test_unknown_kind_in_docs_fails(tmp_path: Path) -> None:
    _write_valid_artifacts(tmp_path)
    _write(tmp_path / DIST_DIR / DOCS_JSON, [{**_DOC, "kind": "file"}])

    result = validate_artifacts(tmp_path)

    assert [e.index for e in result.errors] == [0]
    assert _messages_contain(result.errors, "Schema validation failed")


def test_raw_docs_entries_must_be_objects(tmp_path: Path) -> None:
    _write_valid_artifacts(tmp_path)
    _write(tmp_path / DIST_DIR / DOCS_RAW_JSON, [_DOC, "nope"])

    result = validate_artifacts(tmp_path)

    assert [e.index for e in result.errors] == [1]


def test_nav_node_without_anchor_fails(tmp_path: Path) -> None:
    _write_valid_artifacts(tmp_path)
    _write(tmp_path / DIST_DIR / NAV_JSON, [{"id": "home"}])

    result = validate_artifacts(tmp_path)

    assert _messages_contain(result.errors, "Schema validation failed")


def test_duplicate_longname_and_constant_are_warnings(tmp_path: Path) -> None:
    _write_valid_artifacts(tmp_path)
    _write(
        tmp_path / DIST_DIR / DOCS_JSON,
        [
            _DOC,
            _DOC,
            {"kind": "constant", "name": "MAX", "longname": "MAX", "description": "x"},
        ],
    )

    result = validate_artifacts(tmp_path)

    assert result.ok
    assert _messages_contain(result.warnings, "Duplicate longname 'Foo'")
    assert _messages_contain(result.warnings, "not normalized")


def test_unknown_member_category_fails(tmp_path: Path) -> None:
    _write_valid_artifacts(tmp_path)
    _write(
        tmp_path / DIST_DIR / MEMBERS_JSON,
        {"classes": [_DOC], "widgets": [], "tutorials": []},
    )

    result = validate_artifacts(tmp_path)

    assert [e.message for e in result.errors] == [
        "Unknown member category 'widgets'."
    ]
