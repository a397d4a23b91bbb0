"""Artifact generation entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import PublishConfig


def publish(
    *,
    input_path: Path,
    root: Path,
    out_dir: Path | None = None,
    config: PublishConfig | None = None,
    tutorials_dir: Path | None = None,
) -> dict[str, object]:
    """Publish via lazy import to avoid package import cycles."""
    from artifacts.write import publish as _publish

    return _publish(
        input_path=input_path,
        root=root,
        out_dir=out_dir,
        config=config,
        tutorials_dir=tutorials_dir,
    )


__all__ = ["publish"]
