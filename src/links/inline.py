"""Inline cross-reference markup (``{@link ...}``) resolution."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from links.registry import LinkRegistry

# [caption]{@link target}, {@link target|caption}, {@link target caption}
_LINK_TAG = re.compile(
    r"(?:\[(?P<caption>[^\]]+)\])?\{@(?P<tag>link|linkcode|linkplain)\s+(?P<body>[^}]+)\}",
    re.IGNORECASE,
)
_TUTORIAL_TAG = re.compile(
    r"(?:\[(?P<caption>[^\]]+)\])?\{@tutorial\s+(?P<name>[^}\s]+)\s*\}",
    re.IGNORECASE,
)


def _split_target(body: str) -> tuple[str, str | None]:
    body = body.strip()
    if "|" in body:
        target, text = body.split("|", 1)
        return target.strip(), text.strip() or None
    if " " in body:
        target, text = body.split(" ", 1)
        return target.strip(), text.strip() or None
    return body, None


def resolve_links(html: str, registry: LinkRegistry) -> str:
    """Turn ``{@link foo}`` into ``<a href="foo.html">foo</a>``.

    Unresolvable targets render as plain (escaped) text.
    """

    def _replace_link(match: re.Match[str]) -> str:
        target, text = _split_target(match.group("body"))
        text = match.group("caption") or text
        anchor = registry.linkto(target, text)
        if match.group("tag").lower() == "linkcode":
            return f"<code>{anchor}</code>"
        return anchor

    def _replace_tutorial(match: re.Match[str]) -> str:
        return registry.tutorial_link(match.group("name"), match.group("caption"))

    html = _LINK_TAG.sub(_replace_link, html)
    return _TUTORIAL_TAG.sub(_replace_tutorial, html)


__all__ = ["resolve_links"]
