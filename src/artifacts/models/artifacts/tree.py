"""Containment tree models produced by grafting."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ParameterNode(BaseModel):
    name: str = ""
    type: str | list[str] = ""
    description: str = ""
    default: Any = ""
    optional: bool | str = ""
    nullable: bool | str = ""


class ReturnsNode(BaseModel):
    type: str | list[str] = ""
    description: str = ""


class FunctionNode(BaseModel):
    name: str
    access: str = ""
    virtual: bool = False
    description: str = ""
    parameters: list[ParameterNode] = Field(default_factory=list)
    examples: list[Any] = Field(default_factory=list)
    returns: ReturnsNode | None = None


class EventNode(FunctionNode):
    pass


class PropertyNode(BaseModel):
    name: str
    access: str = ""
    virtual: bool = False
    description: str = ""
    type: str | list[str] = ""


class ConstructorNode(BaseModel):
    name: str
    description: str = ""
    parameters: list[ParameterNode] = Field(default_factory=list)
    examples: list[Any] = Field(default_factory=list)


class ContainerNode(BaseModel):
    """Any node that can hold children."""

    namespaces: list[NamespaceNode] = Field(default_factory=list)
    mixins: list[MixinNode] = Field(default_factory=list)
    functions: list[FunctionNode] = Field(default_factory=list)
    properties: list[PropertyNode] = Field(default_factory=list)
    events: list[EventNode] = Field(default_factory=list)
    classes: list[ClassNode] = Field(default_factory=list)


class GraftRoot(ContainerNode):
    pass


class NamespaceNode(ContainerNode):
    name: str
    description: str = ""
    access: str = ""
    virtual: bool = False


class MixinNode(NamespaceNode):
    pass


class ClassNode(ContainerNode):
    name: str
    description: str = ""
    extends: list[str] = Field(default_factory=list)
    access: str = ""
    virtual: bool = False
    fires: list[str] = Field(default_factory=list)
    constructor: ConstructorNode


ContainerNode.model_rebuild()
GraftRoot.model_rebuild()
NamespaceNode.model_rebuild()
MixinNode.model_rebuild()
ClassNode.model_rebuild()


__all__ = [
    "ClassNode",
    "ConstructorNode",
    "ContainerNode",
    "EventNode",
    "FunctionNode",
    "GraftRoot",
    "MixinNode",
    "NamespaceNode",
    "ParameterNode",
    "PropertyNode",
    "ReturnsNode",
]
