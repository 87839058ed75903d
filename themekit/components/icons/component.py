"""
Icons component - SVG icon lookup and calendar navigation arrows.

Invariants:
- I1: Unknown icons or groups yield an empty string
- I2: Returned markup is a single line with no whitespace between tags
- I3: The root <svg> carries the requested size and is hidden from
  assistive technology
"""

from __future__ import annotations

import logging
import re

from themekit.core.ports.hooks import FiltersPort

from ._icons import ICON_GROUPS
from .models import (
    CalendarArrowsInput,
    CalendarArrowsOutput,
    GetIconInput,
    GetIconOutput,
)

logger = logging.getLogger(__name__)

DEFAULT_ICON_SIZE = 24

SVG_OPEN_PATTERN = re.compile(r"^<svg(?=[\s>])")
# width/height on the root element are replaced by the requested size
ROOT_SIZE_ATTR_PATTERN = re.compile(r'\s(?:width|height)="[^"]*"')
WHITESPACE_RUN_PATTERN = re.compile(r"[\n\t]+")
BETWEEN_TAGS_PATTERN = re.compile(r">\s*<")

CALENDAR_PREV = "&laquo; "
CALENDAR_NEXT = " &raquo;"


def icon_filter_name(group: str) -> str:
    """Filter that may extend or replace an icon group."""
    return f"svg_icons_{group}"


def get_icon_group(group: str, filters: FiltersPort | None = None) -> dict[str, str]:
    icons = dict(ICON_GROUPS.get(group, {}))
    if filters is not None:
        icons = filters.apply_filters(icon_filter_name(group), icons)
    return icons


def normalize_svg(markup: str, size: int) -> str:
    """Apply size/accessibility attributes and collapse whitespace."""
    svg = markup.strip()
    open_end = svg.find(">")
    if open_end != -1:
        svg = ROOT_SIZE_ATTR_PATTERN.sub("", svg[:open_end]) + svg[open_end:]

    replacement = (
        f'<svg class="svg-icon" width="{size:d}" height="{size:d}" '
        'aria-hidden="true" role="img" focusable="false"'
    )
    svg = SVG_OPEN_PATTERN.sub(replacement, svg)
    svg = WHITESPACE_RUN_PATTERN.sub(" ", svg)
    return BETWEEN_TAGS_PATTERN.sub("><", svg)


def get_svg(
    icon: str,
    size: int = DEFAULT_ICON_SIZE,
    group: str = "ui",
    filters: FiltersPort | None = None,
) -> str:
    """
    Get the SVG markup for an icon.

    Args:
        icon: Icon name, e.g. `arrow_left`.
        size: Width and height in pixels.
        group: Icon group (`ui` or `social`).
        filters: Optional filters port for the `svg_icons_{group}` hook.

    Returns:
        Normalized SVG markup, or "" if the icon is unknown.
    """
    icons = get_icon_group(group, filters)
    markup = icons.get(icon)
    if not markup:
        logger.debug("No icon '%s' in group '%s'", icon, group)
        return ""
    return normalize_svg(markup, size)


def change_calendar_nav_arrows(
    calendar_output: str,
    size: int = DEFAULT_ICON_SIZE,
    filters: FiltersPort | None = None,
) -> str:
    """Swap the calendar's text arrows for the arrow icons."""
    calendar_output = calendar_output.replace(
        CALENDAR_PREV, get_svg("arrow_left", size, filters=filters)
    )
    return calendar_output.replace(CALENDAR_NEXT, get_svg("arrow_right", size, filters=filters))


# --- Component Entry Points ---


def run_get_icon(
    inp: GetIconInput,
    *,
    filters: FiltersPort | None = None,
) -> GetIconOutput:
    svg = get_svg(inp.icon, inp.size, inp.group, filters)
    warnings = [] if svg else [f"Unknown icon '{inp.icon}' in group '{inp.group}'"]
    return GetIconOutput(svg=svg, found=bool(svg), warnings=warnings)


def run_calendar_arrows(
    inp: CalendarArrowsInput,
    *,
    filters: FiltersPort | None = None,
) -> CalendarArrowsOutput:
    replaced = inp.calendar_html.count(CALENDAR_PREV) + inp.calendar_html.count(CALENDAR_NEXT)
    html = change_calendar_nav_arrows(inp.calendar_html, inp.size, filters)
    return CalendarArrowsOutput(calendar_html=html, replaced=replaced)


run = run_get_icon
