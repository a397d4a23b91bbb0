from __future__ import annotations

from pathlib import Path
from typing import Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = "docgraft.toml"

# Sentinel destination: dump the final symbol list to stdout, write nothing.
CONSOLE_DESTINATION = "console"

AccessLevel = Literal["all", "package", "public", "protected", "private", "undefined"]


class StaticFilesConfig(BaseModel):
    """User-specified static assets copied into the destination."""

    model_config = ConfigDict(extra="forbid")

    include: list[str] = Field(
        default_factory=list,
        description="Files or directories to copy (relative to the project root)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="fnmatch patterns for files to skip while copying",
    )


class TemplatesConfig(BaseModel):
    """Options consumed by the page templates."""

    model_config = ConfigDict(extra="forbid")

    use_longname_in_nav: bool = Field(
        default=False,
        description="Show fully-qualified longnames instead of names in the sidebar",
    )
    output_source_files: bool = Field(
        default=True,
        description="Emit pretty-printed source listing pages",
    )
    layout_file: str | None = Field(
        default=None,
        description="Alternative layout template (path relative to the project root)",
    )
    static_files: StaticFilesConfig = Field(default_factory=StaticFilesConfig)


class PublishConfig(BaseModel):
    """Configuration for a docgraft publish run."""

    model_config = ConfigDict(extra="forbid")

    destination: str = Field(
        default="docs",
        description="Output directory, or 'console' to print the symbol dump",
    )
    template: str | None = Field(
        default=None,
        description="Template directory (default: the bundled theme)",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read source files",
    )
    tutorials: str | None = Field(
        default=None,
        description="Directory holding tutorial files",
    )
    show_private: bool = Field(
        default=False,
        description="Publish symbols tagged @private",
    )
    access: list[AccessLevel] = Field(
        default_factory=list,
        description="Access levels to publish (empty = policy defaults)",
    )
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        import codecs

        try:
            codecs.lookup(v)
        except LookupError as exc:
            msg = f"Unknown encoding '{v}'"
            raise ValueError(msg) from exc
        return v

    @property
    def to_console(self) -> bool:
        return self.destination == CONSOLE_DESTINATION


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_destination(root: Path, destination: str) -> Path:
    """Resolve a config-provided destination safely within the project root.

    The destination must be a non-empty relative path that remains within
    the project root after resolution. Absolute paths and paths that escape
    the root are rejected; use ``--out-dir`` for arbitrary locations.
    """
    if not destination:
        msg = "destination must be a non-empty relative path"
        raise ConfigError(msg)

    if destination == CONSOLE_DESTINATION:
        msg = "the console destination has no output directory"
        raise ConfigError(msg)

    if destination.startswith("~"):
        msg = "destination must be a relative path within the project root"
        raise ConfigError(msg)

    output_path = Path(destination)
    if output_path.is_absolute():
        msg = "destination must be a relative path within the project root"
        raise ConfigError(msg)

    try:
        resolved_root = root.resolve()
        resolved_output = (resolved_root / output_path).resolve()
    except OSError as exc:
        msg = f"Failed to resolve destination '{destination}': {exc}"
        raise ConfigError(msg) from exc

    try:
        resolved_output.relative_to(resolved_root)
    except ValueError as exc:
        msg = f"destination '{destination}' escapes the project root"
        raise ConfigError(msg) from exc

    return resolved_output


def load_config(root: Path) -> PublishConfig:
    """Load configuration from docgraft.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return PublishConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return PublishConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
