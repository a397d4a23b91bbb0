"""Category-grouped member map."""

from __future__ import annotations

from pydantic import BaseModel, Field

from artifacts.models.artifacts.symbols import Symbol
from artifacts.models.artifacts.tutorials import Tutorial


class MemberMap(BaseModel):
    """Published symbols grouped by the category they are listed under."""

    classes: list[Symbol] = Field(default_factory=list)
    externals: list[Symbol] = Field(default_factory=list)
    events: list[Symbol] = Field(default_factory=list)
    globals: list[Symbol] = Field(default_factory=list)
    mixins: list[Symbol] = Field(default_factory=list)
    modules: list[Symbol] = Field(default_factory=list)
    namespaces: list[Symbol] = Field(default_factory=list)
    interfaces: list[Symbol] = Field(default_factory=list)
    tutorials: list[Tutorial] = Field(default_factory=list)


__all__ = ["MemberMap"]
