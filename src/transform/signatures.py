"""Signature and attribute badge synthesis.

The builders are pure string formatting over already-resolved type names;
the link registry is passed in so type names that are documented symbols
render as links. ``add_signature`` rebuilds ``signature``/``attribs`` from
scratch every time, so running it twice gives the same result.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from artifacts.models.artifacts.symbols import type_names
from utils import htmlsafe

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from artifacts.models.artifacts.symbols import Param, Returns, Symbol
    from links.registry import LinkRegistry

_FUNCTION_CODE_TYPE = re.compile(r"[Ff]unction")
_TYPED_KINDS = frozenset({"member", "constant"})


def needs_signature(symbol: Symbol) -> bool:
    """Functions, classes, function typedefs and callable namespaces."""
    if symbol.kind in ("function", "class"):
        return True

    if symbol.kind == "typedef":
        return any(name.lower() == "function" for name in type_names(symbol))

    if symbol.kind == "namespace" and symbol.meta is not None:
        code_type = symbol.meta.code.type
        return bool(code_type and _FUNCTION_CODE_TYPE.search(code_type))

    return False


def get_attribs(item: object) -> list[str]:
    """Modifiers shown in a symbol's (or return value's) attribute badge."""
    attribs: list[str] = []
    kind = getattr(item, "kind", None)

    if getattr(item, "is_async", False):
        attribs.append("async")
    if getattr(item, "generator", False):
        attribs.append("generator")
    if getattr(item, "virtual", False):
        attribs.append("abstract")

    access = getattr(item, "access", None)
    if access and access != "public":
        attribs.append(access)

    scope = getattr(item, "scope", None)
    if scope in ("static", "inner") and kind in ("function", "member", "constant"):
        attribs.append(scope)

    if getattr(item, "readonly", False) is True and kind == "member":
        attribs.append("readonly")
    if kind == "constant":
        attribs.append("constant")

    if getattr(item, "optional", None):
        attribs.append("opt")

    nullable = getattr(item, "nullable", None)
    if nullable is True:
        attribs.append("nullable")
    elif nullable is False:
        attribs.append("non-null")

    return attribs


def get_signature_attributes(param: Param) -> list[str]:
    attributes: list[str] = []
    if param.optional:
        attributes.append("opt")
    if param.nullable is True:
        attributes.append("nullable")
    elif param.nullable is False:
        attributes.append("non-null")
    return attributes


def build_attribs_string(attribs: Sequence[str]) -> str:
    if not attribs:
        return ""
    return htmlsafe(f"({', '.join(attribs)}) ")


def build_item_type_strings(item: object, registry: LinkRegistry) -> list[str]:
    return [registry.linkto(name) for name in type_names(item)]


def update_item_name(param: Param) -> str:
    item_name = htmlsafe(param.name)

    if param.variable:
        item_name = f"&hellip;{item_name}"

    attributes = get_signature_attributes(param)
    if attributes:
        item_name = (
            f'{item_name}<span class="signature-attributes">'
            f"{', '.join(attributes)}</span>"
        )

    return item_name


def format_params(params: Iterable[Param]) -> list[str]:
    """Format top-level params; dotted sub-params (``opts.foo``) are dropped."""
    return [
        update_item_name(param)
        for param in params
        if param.name and "." not in param.name
    ]


def signature_params(symbol: Symbol) -> str:
    params = format_params(getattr(symbol, "params", []))
    return f"{htmlsafe(symbol.name)}({', '.join(params)})"


def signature_returns(symbol: Symbol, registry: LinkRegistry) -> str:
    """``' &rarr; (attribs) {T|U}'`` or an empty string without return types."""
    source: list[Returns] = getattr(symbol, "yields", None) or getattr(
        symbol, "returns", []
    )

    attribs: list[str] = []
    return_types: list[str] = []
    for item in source:
        for attrib in get_attribs(item):
            if attrib not in attribs:
                attribs.append(attrib)
        for type_string in build_item_type_strings(item, registry):
            if type_string not in return_types:
                return_types.append(type_string)

    if not return_types:
        return ""
    return f" &rarr; {build_attribs_string(attribs)}{{{'|'.join(return_types)}}}"


def signature_types(symbol: Symbol, registry: LinkRegistry) -> str:
    types = build_item_type_strings(symbol, registry)
    suffix = f" :{'|'.join(types)}" if types else ""
    return f'<span class="type-signature">{suffix}</span>'


def attribs_badge(symbol: Symbol) -> str:
    return f'<span class="type-signature">{build_attribs_string(get_attribs(symbol))}</span>'


def add_signature(symbol: Symbol, registry: LinkRegistry) -> None:
    """Set ``signature`` and ``attribs`` for a single symbol."""
    if needs_signature(symbol):
        symbol.signature = (
            f'<span class="signature">{signature_params(symbol)}</span>'
            f'<span class="type-signature">{signature_returns(symbol, registry)}</span>'
        )
        symbol.attribs = attribs_badge(symbol)
    elif symbol.kind in _TYPED_KINDS:
        symbol.signature = signature_types(symbol, registry)
        symbol.attribs = attribs_badge(symbol)
    else:
        symbol.attribs = ""


def synthesize_signatures(symbols: Iterable[Symbol], registry: LinkRegistry) -> None:
    for symbol in symbols:
        add_signature(symbol, registry)


__all__ = [
    "add_signature",
    "attribs_badge",
    "build_attribs_string",
    "format_params",
    "get_attribs",
    "needs_signature",
    "signature_params",
    "signature_returns",
    "signature_types",
    "synthesize_signatures",
    "update_item_name",
]
