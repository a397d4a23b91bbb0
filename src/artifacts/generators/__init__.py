"""Page and asset generators for docgraft output."""

from artifacts.generators.pages import PagesGenerator
from artifacts.generators.sources import SourcesGenerator
from artifacts.generators.static import StaticGenerator
from artifacts.generators.tutorials import TutorialsGenerator

__all__ = [
    "PagesGenerator",
    "SourcesGenerator",
    "StaticGenerator",
    "TutorialsGenerator",
]
