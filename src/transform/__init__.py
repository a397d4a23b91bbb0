"""Pure in-memory transformation stages of the publish pipeline."""

from transform.decorate import (
    add_ancestors,
    assign_ids,
    decorate_examples,
    decorate_see,
    normalize_constants,
)
from transform.listeners import link_event_listeners
from transform.members import attach_module_symbols, get_members
from transform.navigation import build_nav, build_nav_html
from transform.signatures import needs_signature, synthesize_signatures
from transform.sources import SourceCatalog, SourceFile, build_source_catalog

__all__ = [
    "SourceCatalog",
    "SourceFile",
    "add_ancestors",
    "assign_ids",
    "attach_module_symbols",
    "build_nav",
    "build_nav_html",
    "build_source_catalog",
    "decorate_examples",
    "decorate_see",
    "get_members",
    "link_event_listeners",
    "needs_signature",
    "normalize_constants",
    "synthesize_signatures",
]
