"""Containment tree reconstruction (grafting) from parent pointers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from artifacts.models.artifacts.symbols import type_names
from artifacts.models.artifacts.tree import (
    ClassNode,
    ConstructorNode,
    ContainerNode,
    EventNode,
    FunctionNode,
    GraftRoot,
    MixinNode,
    NamespaceNode,
    ParameterNode,
    PropertyNode,
    ReturnsNode,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pydantic import BaseModel

    from artifacts.models.artifacts.symbols import Param, Returns, Symbol

logger = logging.getLogger(__name__)

ChildIndex = dict[str | None, list["Symbol"]]


def _type_value(item: object) -> str | list[str]:
    names = type_names(item)
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return names


def _parameters(params: Iterable[Param]) -> list[ParameterNode]:
    return [
        ParameterNode(
            name=param.name,
            type=_type_value(param),
            description=param.description or "",
            default=(
                param.defaultvalue if "defaultvalue" in param.model_fields_set else ""
            ),
            optional=param.optional if isinstance(param.optional, bool) else "",
            nullable=param.nullable if isinstance(param.nullable, bool) else "",
        )
        for param in params
    ]


def _returns(returns: Sequence[Returns]) -> ReturnsNode | None:
    if not returns:
        return None
    first = returns[0]
    return ReturnsNode(type=_type_value(first), description=first.description or "")


def _examples(symbol: Symbol) -> list[object]:
    return [
        example if isinstance(example, str) else example.model_dump()
        for example in symbol.examples
    ]


def _materialize(symbol: Symbol) -> tuple[str, BaseModel] | None:
    """Build the typed tree node for a symbol and name the bucket it goes in."""
    common = {
        "name": symbol.name,
        "access": symbol.access or "",
        "virtual": bool(symbol.virtual),
        "description": symbol.description or "",
    }

    if symbol.kind == "namespace":
        return "namespaces", NamespaceNode(**common)

    if symbol.kind == "mixin":
        return "mixins", MixinNode(**common)

    if symbol.kind in ("function", "event"):
        node_type = FunctionNode if symbol.kind == "function" else EventNode
        node = node_type(
            **common,
            parameters=_parameters(symbol.params),
            examples=_examples(symbol),
            returns=_returns(symbol.returns),
        )
        return ("functions" if symbol.kind == "function" else "events"), node

    if symbol.kind in ("member", "constant"):
        return "properties", PropertyNode(**common, type=_type_value(symbol))

    if symbol.kind == "class":
        node = ClassNode(
            name=symbol.name,
            description=symbol.classdesc or "",
            extends=list(symbol.augments),
            access=symbol.access or "",
            virtual=bool(symbol.virtual),
            fires=list(symbol.fires),
            constructor=ConstructorNode(
                name=symbol.name,
                description=symbol.description or "",
                parameters=_parameters(symbol.params),
                examples=_examples(symbol),
            ),
        )
        return "classes", node

    return None


def build_child_index(symbols: Iterable[Symbol]) -> ChildIndex:
    """Map each parent longname (``None`` for top level) to its children."""
    index: ChildIndex = {}
    for symbol in symbols:
        index.setdefault(symbol.memberof, []).append(symbol)
    return index


def graft(symbols: Sequence[Symbol]) -> GraftRoot:
    """Rebuild the namespace/mixin/class containment tree.

    Children are attached under the node of the symbol named by their
    ``memberof``. Namespaces, mixins and classes take children of their
    own; functions, members and events are leaves. A symbol whose parent is
    not in ``symbols`` is never attached, and each longname is expanded at
    most once, so malformed ``memberof`` cycles terminate.
    """
    children = build_child_index(symbols)
    longnames = {symbol.longname for symbol in symbols}
    for parent in children:
        if parent is not None and parent not in longnames:
            logger.debug(
                "dropping %d symbols with unknown parent %r",
                len(children[parent]),
                parent,
            )

    root = GraftRoot()
    expanded: set[str] = set()
    stack: list[tuple[ContainerNode, str | None]] = [(root, None)]

    while stack:
        parent_node, parent_longname = stack.pop()
        for symbol in children.get(parent_longname, []):
            built = _materialize(symbol)
            if built is None:
                continue
            bucket, node = built
            getattr(parent_node, bucket).append(node)
            if isinstance(node, ContainerNode) and symbol.longname not in expanded:
                expanded.add(symbol.longname)
                stack.append((node, symbol.longname))

    return root


__all__ = ["build_child_index", "graft"]
