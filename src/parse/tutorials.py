"""Tutorial discovery.

Every ``.html``/``.htm``/``.xhtml``/``.md``/``.markdown`` file in the
tutorials directory is a tutorial named after its stem. JSON files supply
titles and nesting: ``<name>.json`` configures the tutorial ``<name>``,
any other JSON file maps tutorial names to configs. A config is
``{"title": str, "children": [names] | {name: config}}``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import orjson

from artifacts.models.artifacts.tutorials import Tutorial, TutorialRoot, TutorialType
from parse.doclets import InputError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_TUTORIAL_SUFFIXES: dict[str, TutorialType] = {
    ".html": "html",
    ".htm": "html",
    ".xhtml": "html",
    ".md": "markdown",
    ".markdown": "markdown",
}


def _read_configs(directory: Path, names: set[str]) -> dict[str, dict[str, Any]]:
    configs: dict[str, dict[str, Any]] = {}
    for path in sorted(directory.glob("*.json")):
        try:
            data = orjson.loads(path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as exc:
            msg = f"Invalid tutorial config {path}: {exc}"
            raise InputError(msg) from exc
        if not isinstance(data, dict):
            msg = f"Tutorial config {path} must be a JSON object"
            raise InputError(msg)
        if path.stem in names:
            configs[path.stem] = data
        else:
            _collect_configs(data, configs)
    return configs


def _collect_configs(mapping: dict[str, Any], configs: dict[str, dict[str, Any]]) -> None:
    for name, config in mapping.items():
        if not isinstance(config, dict):
            continue
        configs[name] = config
        children = config.get("children")
        if isinstance(children, dict):
            _collect_configs(children, configs)


def _child_names(config: dict[str, Any]) -> list[str]:
    children = config.get("children") or []
    if isinstance(children, dict):
        return list(children)
    return [name for name in children if isinstance(name, str)]


def _is_ancestor(candidate: str, name: str, parents: dict[str, str]) -> bool:
    current: str | None = name
    while current is not None:
        if current == candidate:
            return True
        current = parents.get(current)
    return False


def load_tutorials(directory: Path, encoding: str = "utf-8") -> TutorialRoot:
    """Build the tutorial tree found in ``directory``."""
    tutorials: dict[str, Tutorial] = {}
    for path in sorted(directory.iterdir()):
        tutorial_type = _TUTORIAL_SUFFIXES.get(path.suffix.lower())
        if tutorial_type is None or not path.is_file():
            continue
        tutorials[path.stem] = Tutorial(
            name=path.stem,
            title=path.stem,
            content=path.read_text(encoding=encoding),
            type=tutorial_type,
        )

    configs = _read_configs(directory, set(tutorials))
    parents: dict[str, str] = {}
    for name, tutorial in tutorials.items():
        config = configs.get(name, {})
        if isinstance(config.get("title"), str):
            tutorial.title = config["title"]
        for child_name in _child_names(config):
            child = tutorials.get(child_name)
            # A tutorial has a single parent.
            if child is None or child_name in parents or child_name == name:
                logger.debug("ignoring child %r of tutorial %r", child_name, name)
                continue
            if _is_ancestor(child_name, name, parents):
                logger.warning(
                    "tutorial %r cannot be a child of its descendant %r",
                    child_name,
                    name,
                )
                continue
            tutorial.children.append(child)
            parents[child_name] = name

    return TutorialRoot(
        children=[t for name, t in tutorials.items() if name not in parents]
    )


__all__ = ["load_tutorials"]
