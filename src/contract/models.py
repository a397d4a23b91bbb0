"""Artifact models exposed at the viewer boundary."""

from artifacts.models.artifacts.members import MemberMap
from artifacts.models.artifacts.navigation import NavNode
from artifacts.models.artifacts.symbols import SYMBOL_ADAPTER
from artifacts.models.artifacts.tree import GraftRoot

__all__ = ["SYMBOL_ADAPTER", "GraftRoot", "MemberMap", "NavNode"]
