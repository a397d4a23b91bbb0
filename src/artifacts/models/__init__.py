"""Model namespace for docgraft artifact schemas."""

from artifacts.models.artifacts.members import MemberMap
from artifacts.models.artifacts.navigation import NavNode
from artifacts.models.artifacts.symbols import (
    Param,
    Returns,
    Symbol,
    TypeExpr,
)
from artifacts.models.artifacts.tree import ClassNode, GraftRoot, NamespaceNode
from artifacts.models.artifacts.tutorials import Tutorial, TutorialRoot

__all__ = [
    "ClassNode",
    "GraftRoot",
    "MemberMap",
    "NamespaceNode",
    "NavNode",
    "Param",
    "Returns",
    "Symbol",
    "Tutorial",
    "TutorialRoot",
    "TypeExpr",
]
