"""Input parsing for docgraft."""

from parse.doclets import InputError, parse_symbols, read_doclets
from parse.tutorials import load_tutorials

__all__ = ["InputError", "load_tutorials", "parse_symbols", "read_doclets"]
