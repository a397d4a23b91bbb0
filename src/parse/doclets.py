"""Loading of the parser's doclet dump."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from artifacts.models.artifacts.symbols import SYMBOL_ADAPTER, SYMBOL_KINDS

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from artifacts.models.artifacts.symbols import Symbol

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when the doclet dump cannot be read or is malformed."""


def read_doclets(path: Path) -> list[dict[str, Any]]:
    """Read the raw doclet list (``jsdoc -X`` output) from ``path``."""
    try:
        data = orjson.loads(path.read_bytes())
    except OSError as exc:
        msg = f"Failed to read {path}: {exc}"
        raise InputError(msg) from exc
    except orjson.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise InputError(msg) from exc

    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        msg = f"Expected a JSON array of objects in {path}"
        raise InputError(msg)

    return data


def parse_symbols(raw: Sequence[dict[str, Any]]) -> list[Symbol]:
    """Validate raw doclets into symbol records.

    Doclets of kinds this tool does not publish (``package``, ``file``...)
    and doclets without a longname are skipped. The raw dicts are not
    modified.
    """
    symbols: list[Symbol] = []
    for position, doclet in enumerate(raw):
        kind = doclet.get("kind")
        if kind not in SYMBOL_KINDS or not doclet.get("longname"):
            logger.debug(
                "skipping doclet #%d (kind=%r, longname=%r)",
                position,
                kind,
                doclet.get("longname"),
            )
            continue
        try:
            symbols.append(SYMBOL_ADAPTER.validate_python(doclet))
        except ValidationError as exc:
            msg = f"Malformed doclet {doclet.get('longname')!r}: {exc}"
            raise InputError(msg) from exc
    return symbols


__all__ = ["InputError", "parse_symbols", "read_doclets"]
