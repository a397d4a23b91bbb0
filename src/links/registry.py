"""Longname → output identifier registry.

The registry is the only shared mutable state of a publish run. It is
populated once (reserved names, then one entry per published symbol, then
source pages and tutorials), frozen, and only read afterwards. Callers get
it passed in explicitly; there is no module-level instance.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import quote

from artifacts.models.artifacts.symbols import CONTAINER_KINDS, SCOPE_PUNCTUATION
from utils import htmlsafe, is_module_exports

if TYPE_CHECKING:
    from artifacts.models.artifacts.symbols import Symbol

FILE_EXTENSION = ".html"
INDEX = "index"
GLOBAL = "global"

_NAMESPACES = ("module", "event", "external")
_NAMESPACE_PREFIX = re.compile(rf"^({'|'.join(_NAMESPACES)}):")
_UNSAFE_CHARS = re.compile(r"""[\\/?*:|'"<>]""")
_VARIATION = re.compile(r"\([\s\S]*\)$")
_LEADING_PUNCT = re.compile(r"^[.-]")
_FAKE_CONTAINER = re.compile(r"^(\w+):")
_EXTERNAL_URL = re.compile(r"^(?:https?|ftp)://", re.IGNORECASE)
_TYPE_SEPARATORS = re.compile(r"(\.?<|>|,\s*|\||\(|\)|\s+)")

# Characters encodeURI leaves untouched.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


class LinkResolutionError(LookupError):
    """A symbol that must be linked has no output identifier."""


class RegistryFrozenError(RuntimeError):
    """An allocation was attempted after the registry was frozen."""


def format_name_for_link(symbol: Symbol) -> str:
    """Build the fragment identifying a symbol inside its parent's page."""
    prefix = f"{symbol.kind}:" if symbol.kind in _NAMESPACES else ""
    name = f"{prefix}{symbol.name}{symbol.variation or ''}"
    punctuation = SCOPE_PUNCTUATION.get(symbol.scope or "", "")
    # "#" would read as a second fragment marker.
    if punctuation != "#":
        name = f"{punctuation}{name}"
    return name


class LinkRegistry:
    """Allocates collision-free filenames and maps longnames onto them."""

    def __init__(self) -> None:
        self._files: dict[str, str] = {}
        self._urls: dict[str, str] = {}
        # Unencoded page filenames; urls are encoded once, when composed.
        self._pages: dict[str, str] = {}
        self._tutorials: dict[str, str] = {}
        self._frozen = False

        # Claimed before any symbol so neither can be handed out later.
        # "index" is also a valid longname, so it is reserved but not bound.
        self.index_url = self.reserve(INDEX)
        self.global_url = self.assign(GLOBAL)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    def _check_writable(self, what: str) -> None:
        if self._frozen:
            msg = f"link registry is frozen; cannot allocate {what!r}"
            raise RegistryFrozenError(msg)

    def unique_filename(self, text: str) -> str:
        """Allocate a filesystem-safe filename derived from ``text``.

        Collisions are detected case-insensitively and resolved by appending
        an incrementing counter (``foo``, ``foo_1``, ``foo_2``...).
        """
        self._check_writable(text)

        basename = _NAMESPACE_PREFIX.sub(r"\1-", text or "")
        basename = _UNSAFE_CHARS.sub("_", basename)
        basename = basename.replace("~", "-").replace("#", "_")
        basename = _VARIATION.sub("", basename)
        basename = _LEADING_PUNCT.sub("", basename)
        basename = basename or "_"

        candidate = basename
        counter = 0
        while candidate.lower() in self._files:
            counter += 1
            candidate = f"{basename}_{counter}"

        self._files[candidate.lower()] = text
        return f"{candidate}{FILE_EXTENSION}"

    def reserve(self, name: str) -> str:
        """Claim a filename without binding it to a longname."""
        return self.unique_filename(name)

    def register(self, longname: str, url: str) -> None:
        """Bind ``longname`` to an explicit url."""
        if self._urls.get(longname) == url:
            return
        self._check_writable(longname)
        self._urls[longname] = url

    def assign(self, longname: str) -> str:
        """Return the page filename for ``longname``, allocating one if needed.

        Idempotent: repeated calls for the same longname return the same
        filename. The filename is not URL-encoded; a longname without a url
        of its own is bound to the encoded form.
        """
        filename = self._pages.get(longname)
        if filename is None:
            filename = self.unique_filename(longname)
            self._pages[longname] = filename
            self._urls.setdefault(longname, quote(filename, safe=_URI_SAFE))
        return filename

    def page_url(self, longname: str) -> str:
        """URL-encoded page of ``longname``, without a fragment."""
        return quote(self.assign(longname), safe=_URI_SAFE)

    def resolve(self, longname: str) -> str | None:
        return self._urls.get(longname)

    def require(self, longname: str) -> str:
        """Like ``resolve`` but a missing identifier is fatal."""
        url = self._urls.get(longname)
        if url is None:
            msg = f"No output identifier registered for symbol {longname!r}"
            raise LinkResolutionError(msg)
        return url

    def longnames(self) -> list[str]:
        """Registered longnames in registration order."""
        return list(self._urls)

    def create_link(self, symbol: Symbol) -> str:
        """Compute the url of a symbol.

        Container kinds (and module exports) get a page of their own;
        everything else lives in its parent's page, or the global page,
        under a fragment.
        """
        longname = symbol.longname
        fragment = ""

        if symbol.kind in CONTAINER_KINDS or is_module_exports(symbol):
            filename = self.assign(longname)
        else:
            # A mistagged symbol whose longname implies a page of its own,
            # such as a module reported with kind "member".
            match = _FAKE_CONTAINER.match(longname)
            mistagged = match is not None and match.group(1) in CONTAINER_KINDS
            if mistagged:
                filename = self.assign(symbol.memberof or longname)
                if symbol.name != longname:
                    fragment = format_name_for_link(symbol)
            else:
                filename = self.assign(symbol.memberof or GLOBAL)
                fragment = format_name_for_link(symbol)

        url = f"{filename}#{fragment}" if fragment else filename
        return quote(url, safe=_URI_SAFE)

    def register_tutorial(self, name: str) -> str:
        url = self._tutorials.get(name)
        if url is None:
            url = quote(self.unique_filename(f"tutorial-{name}"), safe=_URI_SAFE)
            self._tutorials[name] = url
        return url

    def tutorial_url(self, name: str) -> str | None:
        return self._tutorials.get(name)

    def tutorial_link(self, name: str, text: str | None = None) -> str:
        """Anchor to a tutorial page, or a disabled marker when unknown."""
        url = self._tutorials.get(name)
        if url is None:
            return f'<em class="disabled">Tutorial: {htmlsafe(name)}</em>'
        return f'<a href="{htmlsafe(url)}">{htmlsafe(text or name)}</a>'

    def linkto(
        self,
        longname: str,
        text: str | None = None,
        css_class: str | None = None,
        fragment: str | None = None,
    ) -> str:
        """Render an anchor to ``longname``, or escaped text if unresolved.

        ``text`` is raw text and is escaped here. Type applications such as
        ``Array.<Foo>`` link each component that resolves.
        """
        label = longname if text is None else text

        if _EXTERNAL_URL.match(longname):
            url: str | None = longname
        else:
            url = self.resolve(longname)

        if url is None:
            if label == longname and _TYPE_SEPARATORS.search(longname):
                return self._link_type_application(longname, css_class)
            return htmlsafe(label)

        if fragment:
            url = f"{url}#{fragment}"
        class_attr = f' class="{htmlsafe(css_class)}"' if css_class else ""
        return f'<a href="{htmlsafe(url)}"{class_attr}>{htmlsafe(label)}</a>'

    def _link_type_application(self, expression: str, css_class: str | None) -> str:
        parts: list[str] = []
        for token in _TYPE_SEPARATORS.split(expression):
            if not token:
                continue
            if _TYPE_SEPARATORS.fullmatch(token) or self.resolve(token) is None:
                parts.append(htmlsafe(token))
            else:
                parts.append(self.linkto(token, css_class=css_class))
        return "".join(parts)


__all__ = [
    "FILE_EXTENSION",
    "GLOBAL",
    "INDEX",
    "LinkRegistry",
    "LinkResolutionError",
    "RegistryFrozenError",
    "format_name_for_link",
]
