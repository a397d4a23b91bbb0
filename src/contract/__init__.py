"""Stable artifact contract surface for docgraft.

Filenames and models that the documentation viewer depends on.
"""

from contract.artifacts import (
    ARTIFACT_SPECS,
    DIST_DIR,
    DOCS_JSON,
    DOCS_RAW_JSON,
    MEMBERS_JSON,
    NAV_JSON,
    TREE_JSON,
    ArtifactSpec,
)


def __getattr__(name: str) -> object:
    if name in {"GraftRoot", "MemberMap", "NavNode"}:
        from contract.models import GraftRoot, MemberMap, NavNode

        return {
            "GraftRoot": GraftRoot,
            "MemberMap": MemberMap,
            "NavNode": NavNode,
        }[name]

    if name in {"ValidationMessage", "ValidationResult", "validate_artifacts"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_artifacts,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_artifacts": validate_artifacts,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "ARTIFACT_SPECS",
    "DIST_DIR",
    "DOCS_JSON",
    "DOCS_RAW_JSON",
    "MEMBERS_JSON",
    "NAV_JSON",
    "TREE_JSON",
    "ArtifactSpec",
    "GraftRoot",
    "MemberMap",
    "NavNode",
    "ValidationMessage",
    "ValidationResult",
    "validate_artifacts",
]
