"""Symbol models for parsed doclets.

A symbol record is the unit of documentation: one documented entity as
reported by the upstream comment parser. Records are modelled as a tagged
union over ``kind``; every variant shares the identity fields of
``_SymbolBase`` and carries only the fields meaningful for its kind.

Unknown parser fields are kept (``extra="allow"``) so the final dump stays a
superset of what the parser produced.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

SymbolKind = Literal[
    "module",
    "class",
    "function",
    "member",
    "constant",
    "namespace",
    "mixin",
    "event",
    "interface",
    "external",
    "typedef",
]

SYMBOL_KINDS = frozenset(get_args(SymbolKind))

# Kinds that get their own output page.
CONTAINER_KINDS = frozenset(
    {"class", "module", "external", "namespace", "mixin", "interface"}
)

SCOPE_PUNCTUATION = {"inner": "~", "instance": "#", "static": "."}


class TypeExpr(BaseModel):
    """Resolved type expression (``{names: [...]}``)."""

    model_config = ConfigDict(extra="allow")

    names: list[str] = Field(default_factory=list)


class Param(BaseModel):
    """A declared parameter of a callable symbol."""

    model_config = ConfigDict(extra="allow")

    name: str = ""
    type: TypeExpr | None = None
    description: str = ""
    optional: bool | None = None
    nullable: bool | None = None
    variable: bool | None = None
    defaultvalue: Any = None


class Returns(BaseModel):
    """A declared return (or yield) value."""

    model_config = ConfigDict(extra="allow")

    type: TypeExpr | None = None
    description: str = ""
    optional: bool | None = None
    nullable: bool | None = None


class CodeMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None
    type: str | None = None
    value: Any = None


class Meta(BaseModel):
    """Where the symbol was declared."""

    model_config = ConfigDict(extra="allow")

    path: str | None = None
    filename: str = ""
    lineno: int | None = None
    code: CodeMeta = Field(default_factory=CodeMeta)
    shortpath: str | None = None


class Example(BaseModel):
    caption: str = ""
    code: str = ""


class _SymbolBase(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = ""
    longname: str
    memberof: str | None = None
    scope: str | None = None
    access: str | None = None
    description: str | None = None
    meta: Meta | None = None
    examples: list[Example | str] = Field(default_factory=list)
    see: list[str] = Field(default_factory=list)
    listens: list[str] = Field(default_factory=list)
    fires: list[str] = Field(default_factory=list)
    ignore: bool = False
    undocumented: bool = False
    virtual: bool = False
    is_async: bool = Field(default=False, alias="async")
    generator: bool = False
    version: str | None = None
    since: str | None = None
    variation: str | None = None

    # Synthesized by the publish pipeline, never present on input.
    attribs: str | None = None
    signature: str | None = None
    id: str | None = None
    ancestors: list[str] = Field(default_factory=list)


class _CallableSymbol(_SymbolBase):
    params: list[Param] = Field(default_factory=list)
    returns: list[Returns] = Field(default_factory=list)
    yields: list[Returns] = Field(default_factory=list)


class _TypedSymbol(_SymbolBase):
    type: TypeExpr | None = None
    readonly: bool = False
    nullable: bool | None = None
    optional: bool | None = None


class ModuleSymbol(_SymbolBase):
    kind: Literal["module"] = "module"
    modules: list[Symbol] = Field(default_factory=list)


class ClassSymbol(_CallableSymbol):
    kind: Literal["class"] = "class"
    classdesc: str | None = None
    augments: list[str] = Field(default_factory=list)


class FunctionSymbol(_CallableSymbol):
    kind: Literal["function"] = "function"


class MemberSymbol(_TypedSymbol):
    kind: Literal["member"] = "member"


class ConstantSymbol(_TypedSymbol):
    kind: Literal["constant"] = "constant"


class NamespaceSymbol(_CallableSymbol):
    kind: Literal["namespace"] = "namespace"


class MixinSymbol(_SymbolBase):
    kind: Literal["mixin"] = "mixin"


class EventSymbol(_CallableSymbol):
    kind: Literal["event"] = "event"
    listeners: list[str] = Field(default_factory=list)


class InterfaceSymbol(_SymbolBase):
    kind: Literal["interface"] = "interface"


class ExternalSymbol(_SymbolBase):
    kind: Literal["external"] = "external"


class TypedefSymbol(_CallableSymbol):
    kind: Literal["typedef"] = "typedef"
    type: TypeExpr | None = None
    nullable: bool | None = None
    optional: bool | None = None


Symbol = Annotated[
    Union[
        ModuleSymbol,
        ClassSymbol,
        FunctionSymbol,
        MemberSymbol,
        ConstantSymbol,
        NamespaceSymbol,
        MixinSymbol,
        EventSymbol,
        InterfaceSymbol,
        ExternalSymbol,
        TypedefSymbol,
    ],
    Field(discriminator="kind"),
]

ModuleSymbol.model_rebuild()

SYMBOL_ADAPTER: TypeAdapter[Symbol] = TypeAdapter(Symbol)


def dump_symbol(symbol: Symbol) -> dict[str, Any]:
    """Serialize a symbol the way it appears in the JSON snapshots."""
    return symbol.model_dump(mode="json", by_alias=True, exclude_none=True)


def type_names(item: object) -> list[str]:
    """Return the declared type names of a symbol, param or return entry."""
    type_expr = getattr(item, "type", None)
    if type_expr is None:
        return []
    # Extra (unmodelled) fields are kept as plain dicts.
    if isinstance(type_expr, dict):
        return list(type_expr.get("names") or [])
    return list(type_expr.names)


__all__ = [
    "CONTAINER_KINDS",
    "SCOPE_PUNCTUATION",
    "SYMBOL_ADAPTER",
    "SYMBOL_KINDS",
    "ClassSymbol",
    "CodeMeta",
    "ConstantSymbol",
    "EventSymbol",
    "Example",
    "ExternalSymbol",
    "FunctionSymbol",
    "InterfaceSymbol",
    "MemberSymbol",
    "Meta",
    "MixinSymbol",
    "ModuleSymbol",
    "NamespaceSymbol",
    "Param",
    "Returns",
    "Symbol",
    "SymbolKind",
    "TypeExpr",
    "TypedefSymbol",
    "dump_symbol",
    "type_names",
]
