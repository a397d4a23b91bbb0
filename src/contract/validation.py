"""Validation helpers for published snapshot artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import TypeAdapter, ValidationError

from contract.artifacts import ARTIFACT_SPECS, DIST_DIR, MEMBER_CATEGORIES
from contract.models import SYMBOL_ADAPTER, GraftRoot, MemberMap, NavNode

if TYPE_CHECKING:
    from pathlib import Path

_NAV_ADAPTER: TypeAdapter[list[NavNode]] = TypeAdapter(list[NavNode])


@dataclass(frozen=True)
class ValidationMessage:
    artifact: str
    path: Path
    message: str
    index: int | None = None

    def location(self) -> str:
        if self.index is None:
            return str(self.path)
        return f"{self.path}[{self.index}]"

    def to_dict(self) -> dict[str, object]:
        return {
            "artifact": self.artifact,
            "path": str(self.path),
            "index": self.index,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_artifacts(artifacts_dir: Path) -> ValidationResult:
    """Check the snapshots under ``<artifacts_dir>/dist`` against their models."""
    result = ValidationResult()

    if not artifacts_dir.exists():
        result.errors.append(
            ValidationMessage(
                artifact="artifacts_dir",
                path=artifacts_dir,
                message="Artifacts directory does not exist.",
            )
        )
        return result

    if not artifacts_dir.is_dir():
        result.errors.append(
            ValidationMessage(
                artifact="artifacts_dir",
                path=artifacts_dir,
                message="Artifacts path is not a directory.",
            )
        )
        return result

    dist_dir = artifacts_dir / DIST_DIR
    for artifact_name, spec in ARTIFACT_SPECS.items():
        path = dist_dir / spec.filename
        if not path.exists():
            result.errors.append(
                ValidationMessage(
                    artifact=artifact_name,
                    path=path,
                    message="Required artifact file is missing.",
                )
            )
            continue

        data = _load_json(artifact_name, path, result)
        if data is None:
            continue

        expected_type = list if spec.shape == "array" else dict
        if not isinstance(data, expected_type):
            result.errors.append(
                ValidationMessage(
                    artifact=artifact_name,
                    path=path,
                    message=f"Expected JSON {spec.shape}.",
                )
            )
            continue

        if artifact_name == "docs":
            _validate_docs(artifact_name, path, data, result)
        elif artifact_name == "docs_raw":
            _validate_raw_docs(artifact_name, path, data, result)
        elif artifact_name == "members":
            _validate_member_categories(artifact_name, path, data, result)
            _validate_model(artifact_name, path, result, MemberMap.model_validate, data)
        elif artifact_name == "nav":
            _validate_model(artifact_name, path, result, _NAV_ADAPTER.validate_python, data)
        elif artifact_name == "tree":
            _validate_model(artifact_name, path, result, GraftRoot.model_validate, data)

    return result


def _load_json(artifact_name: str, path: Path, result: ValidationResult) -> Any:
    try:
        return orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        result.errors.append(
            ValidationMessage(
                artifact=artifact_name,
                path=path,
                message=f"Invalid JSON: {exc}.",
            )
        )
        return None


def _validate_model(
    artifact_name: str,
    path: Path,
    result: ValidationResult,
    validate: Any,
    data: Any,
) -> None:
    try:
        validate(data)
    except ValidationError as exc:
        result.errors.append(
            ValidationMessage(
                artifact=artifact_name,
                path=path,
                message=f"Schema validation failed: {exc}.",
            )
        )


def _validate_member_categories(
    artifact_name: str, path: Path, data: dict[str, Any], result: ValidationResult
) -> None:
    for category in sorted(set(data) - set(MEMBER_CATEGORIES)):
        result.errors.append(
            ValidationMessage(
                artifact=artifact_name,
                path=path,
                message=f"Unknown member category {category!r}.",
            )
        )


def _validate_raw_docs(
    artifact_name: str, path: Path, data: list[Any], result: ValidationResult
) -> None:
    for index, doclet in enumerate(data):
        if not isinstance(doclet, dict):
            result.errors.append(
                ValidationMessage(
                    artifact=artifact_name,
                    path=path,
                    index=index,
                    message="Expected JSON object.",
                )
            )


def _validate_docs(
    artifact_name: str, path: Path, data: list[Any], result: ValidationResult
) -> None:
    seen: set[str] = set()
    for index, doclet in enumerate(data):
        try:
            symbol = SYMBOL_ADAPTER.validate_python(doclet)
        except ValidationError as exc:
            result.errors.append(
                ValidationMessage(
                    artifact=artifact_name,
                    path=path,
                    index=index,
                    message=f"Schema validation failed: {exc}.",
                )
            )
            continue

        if symbol.longname in seen:
            result.warnings.append(
                ValidationMessage(
                    artifact=artifact_name,
                    path=path,
                    index=index,
                    message=f"Duplicate longname {symbol.longname!r}.",
                )
            )
        seen.add(symbol.longname)

        if symbol.kind == "constant":
            result.warnings.append(
                ValidationMessage(
                    artifact=artifact_name,
                    path=path,
                    index=index,
                    message="Constant was not normalized to member.",
                )
            )


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_artifacts",
]
