"""Published artifact contract definitions.

Filenames and formats of the machine-readable snapshots consumed by the
single-page viewer. All snapshots live in ``DIST_DIR`` under the
destination directory.
"""

from __future__ import annotations

from dataclasses import dataclass


DIST_DIR = "dist"

DOCS_RAW_JSON = "docs_raw.json"
DOCS_JSON = "docs.json"
MEMBERS_JSON = "members.json"
NAV_JSON = "nav.json"
TREE_JSON = "tree.json"

MEMBER_CATEGORIES = (
    "classes",
    "externals",
    "events",
    "globals",
    "mixins",
    "modules",
    "namespaces",
    "interfaces",
    "tutorials",
)


@dataclass(frozen=True)
class ArtifactSpec:
    """Specification for a published snapshot artifact."""

    filename: str
    shape: str
    required_fields_note: str


ARTIFACT_SPECS: dict[str, ArtifactSpec] = {
    "docs_raw": ArtifactSpec(
        filename=DOCS_RAW_JSON,
        shape="array",
        required_fields_note="Unmodified parser doclets, dumped before pruning.",
    ),
    "docs": ArtifactSpec(
        filename=DOCS_JSON,
        shape="array",
        required_fields_note="Pruned, decorated symbol records.",
    ),
    "members": ArtifactSpec(
        filename=MEMBERS_JSON,
        shape="object",
        required_fields_note="MemberMap keyed by category.",
    ),
    "nav": ArtifactSpec(
        filename=NAV_JSON,
        shape="array",
        required_fields_note="NavNode list in sidebar order.",
    ),
    "tree": ArtifactSpec(
        filename=TREE_JSON,
        shape="object",
        required_fields_note="GraftRoot containment tree.",
    ),
}
