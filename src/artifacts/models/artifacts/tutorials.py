"""Tutorial models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

TutorialType = Literal["html", "markdown"]


class Tutorial(BaseModel):
    """A tutorial page and its nested children."""

    name: str
    title: str
    content: str = ""
    type: TutorialType = "html"
    children: list[Tutorial] = Field(default_factory=list)


class TutorialRoot(BaseModel):
    """Top of the tutorial tree; has no page of its own."""

    children: list[Tutorial] = Field(default_factory=list)

    def walk(self) -> list[Tutorial]:
        """Return every tutorial in depth-first, pre-order sequence."""
        ordered: list[Tutorial] = []
        stack = list(reversed(self.children))
        while stack:
            tutorial = stack.pop()
            ordered.append(tutorial)
            stack.extend(reversed(tutorial.children))
        return ordered


__all__ = ["Tutorial", "TutorialRoot", "TutorialType"]
