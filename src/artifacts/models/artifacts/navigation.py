"""Navigation tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NavNode(BaseModel):
    """A sidebar entry.

    ``anchor`` holds the rendered link (text plus target) or, for headings
    that are not links, the escaped heading text.
    """

    id: str
    anchor: str
    items: list[NavNode] = Field(default_factory=list)


__all__ = ["NavNode"]
