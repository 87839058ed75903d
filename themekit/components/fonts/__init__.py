"""
Fonts component - font-family fallback CSS for non-latin locales.
"""

from themekit.domain.css import generate_css

from ._tables import FONT_ELEMENTS, FONT_FAMILIES
from .component import (
    FONT_ELEMENTS_FILTER,
    FONT_FAMILY_FILTER,
    get_font_elements,
    get_font_families,
    get_non_latin_css,
    run,
)
from .models import FontFallbackInput, FontFallbackOutput
from .ports import FontRulesPort

__all__ = [
    "run",
    "FontFallbackInput",
    "FontFallbackOutput",
    "FontRulesPort",
    "generate_css",
    "get_font_elements",
    "get_font_families",
    "get_non_latin_css",
    "FONT_ELEMENTS",
    "FONT_ELEMENTS_FILTER",
    "FONT_FAMILIES",
    "FONT_FAMILY_FILTER",
]
