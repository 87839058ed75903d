"""
Fonts component - font-family fallback CSS for non-latin locales.

Looks up the locale's fallback fonts and the selectors for a surface
(front-end page, block editor, classic editor), then emits one CSS rule
applying those fonts to those selectors.

Invariants:
- I1: Unmapped locale or surface yields "" (never an error)
- I2: Font and selector order is preserved; lists are joined with ","
- I3: Override tables replace built-in entries key by key
"""

from __future__ import annotations

import logging

from themekit.core.ports.hooks import FiltersPort
from themekit.domain.css import generate_css

from ._tables import FONT_ELEMENTS, FONT_FAMILIES
from .models import FontFallbackInput, FontFallbackOutput
from .ports import FontRulesPort

logger = logging.getLogger(__name__)

FONT_FAMILY_FILTER = "localized_font_family_types"
FONT_ELEMENTS_FILTER = "localized_font_family_elements"


def get_font_families(
    rules: FontRulesPort | None = None,
    filters: FiltersPort | None = None,
) -> dict[str, list[str]]:
    """Locale to fallback font list, with overrides applied."""
    families: dict[str, list[str]] = {k: list(v) for k, v in FONT_FAMILIES.items()}
    if rules is not None:
        families.update({k: list(v) for k, v in rules.families.items()})
    if filters is not None:
        families = filters.apply_filters(FONT_FAMILY_FILTER, families)
    return families


def get_font_elements(
    rules: FontRulesPort | None = None,
    filters: FiltersPort | None = None,
) -> dict[str, list[str]]:
    """Surface type to selector list, with overrides applied."""
    elements: dict[str, list[str]] = {k: list(v) for k, v in FONT_ELEMENTS.items()}
    if rules is not None:
        elements.update({k: list(v) for k, v in rules.elements.items()})
    if filters is not None:
        elements = filters.apply_filters(FONT_ELEMENTS_FILTER, elements)
    return elements


def _resolve(
    locale: str,
    surface: str,
    rules: FontRulesPort | None,
    filters: FiltersPort | None,
) -> FontFallbackOutput:
    fonts = get_font_families(rules, filters).get(locale) or []
    if not fonts:
        logger.debug("No fallback fonts for locale '%s'", locale)
        return FontFallbackOutput(css="", warnings=[f"No fallback fonts for locale '{locale}'"])

    selectors = get_font_elements(rules, filters).get(surface) or []
    if not selectors:
        logger.debug("No font selectors for surface '%s'", surface)
        return FontFallbackOutput(
            css="",
            fonts=fonts,
            warnings=[f"No selectors for surface type '{surface}'"],
        )

    css = generate_css(",".join(selectors), "font-family", ",".join(fonts))
    return FontFallbackOutput(css=css, fonts=fonts, selectors=selectors)


def get_non_latin_css(
    locale: str,
    surface: str = "front-end",
    rules: FontRulesPort | None = None,
    filters: FiltersPort | None = None,
) -> str:
    """
    Get fallback font CSS for the site locale.

    Args:
        locale: Site language code, e.g. `ja` or `zh-CN`.
        surface: "front-end", "block-editor" or "classic-editor".
        rules: Optional font table overrides.
        filters: Optional filters port for the table hooks.

    Returns:
        A CSS rule string, or "" if the locale or surface is unmapped.
    """
    return _resolve(locale, surface, rules, filters).css


# --- Component Entry Points ---


def run(
    inp: FontFallbackInput,
    *,
    rules: FontRulesPort | None = None,
    filters: FiltersPort | None = None,
) -> FontFallbackOutput:
    """Generate fallback font CSS, reporting which lookup missed."""
    return _resolve(inp.locale, inp.surface, rules, filters)
