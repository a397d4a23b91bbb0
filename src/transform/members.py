"""Category grouping of published symbols."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.artifacts.members import MemberMap
from utils import is_module_exports, strip_quotes

if TYPE_CHECKING:
    from collections.abc import Sequence

    from artifacts.models.artifacts.symbols import ModuleSymbol, Symbol
    from artifacts.models.artifacts.tutorials import Tutorial

_GLOBAL_KINDS = frozenset({"member", "function", "constant", "typedef"})


def get_members(
    symbols: Sequence[Symbol], tutorials: Sequence[Tutorial] = ()
) -> MemberMap:
    """Group symbols by the sidebar category they belong to.

    External names lose their surrounding quotes (``@external "jquery.fn"``)
    and module exports are not listed as globals.
    """

    def of_kind(kind: str) -> list[Symbol]:
        return [symbol for symbol in symbols if symbol.kind == kind]

    externals = of_kind("external")
    for external in externals:
        external.name = strip_quotes(external.name)

    globals_ = [
        symbol
        for symbol in symbols
        if symbol.kind in _GLOBAL_KINDS
        and symbol.memberof is None
        and not is_module_exports(symbol)
    ]

    return MemberMap(
        classes=of_kind("class"),
        externals=externals,
        events=of_kind("event"),
        globals=globals_,
        mixins=of_kind("mixin"),
        modules=of_kind("module"),
        namespaces=of_kind("namespace"),
        interfaces=of_kind("interface"),
        tutorials=list(tutorials),
    )


def attach_module_symbols(
    symbols: Sequence[Symbol], modules: Sequence[ModuleSymbol]
) -> None:
    """Attach classes/functions exported as a whole module to that module.

    A class or function whose longname equals a module's longname is what
    the module exports (``module.exports = function () {}``). Copies are
    attached to ``module.modules`` with a ``(require("x"))`` display name.
    Functions need a description to be shown; classes are always shown so
    the constructor signature heading appears.
    """
    exported: dict[str, list[Symbol]] = {}
    for symbol in symbols:
        if symbol.longname.startswith("module:") and symbol.kind != "module":
            exported.setdefault(symbol.longname, []).append(symbol)

    for module in modules:
        candidates = exported.get(module.longname)
        if not candidates:
            continue
        attached: list[Symbol] = []
        for symbol in candidates:
            if not (symbol.description or symbol.kind == "class"):
                continue
            copy = symbol.model_copy(deep=True)
            if copy.kind in ("class", "function"):
                copy.name = copy.name.replace("module:", '(require("') + '"))'
            attached.append(copy)
        module.modules = attached


__all__ = ["attach_module_symbols", "get_members"]
