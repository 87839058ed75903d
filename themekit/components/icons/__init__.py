"""
Icons component - SVG icon lookup and calendar navigation arrows.
"""

from ._icons import ICON_GROUPS, SOCIAL_ICONS, UI_ICONS
from .component import (
    DEFAULT_ICON_SIZE,
    change_calendar_nav_arrows,
    get_icon_group,
    get_svg,
    icon_filter_name,
    normalize_svg,
    run,
    run_calendar_arrows,
    run_get_icon,
)
from .models import (
    CalendarArrowsInput,
    CalendarArrowsOutput,
    GetIconInput,
    GetIconOutput,
)

__all__ = [
    # Entry points
    "run",
    "run_calendar_arrows",
    "run_get_icon",
    # Models
    "CalendarArrowsInput",
    "CalendarArrowsOutput",
    "GetIconInput",
    "GetIconOutput",
    # Functions
    "change_calendar_nav_arrows",
    "get_icon_group",
    "get_svg",
    "icon_filter_name",
    "normalize_svg",
    # Data
    "DEFAULT_ICON_SIZE",
    "ICON_GROUPS",
    "SOCIAL_ICONS",
    "UI_ICONS",
]
