"""
Classes component - body/post CSS class composition.

Invariants:
- I1: The caller's classes come first, in their original order
- I2: Nothing is removed or de-duplicated
- I3: The caller's sequence is never mutated
"""

from __future__ import annotations

from collections.abc import Iterable

from themekit.core.entities import PageContext

from .models import BodyClassesInput, ClassesOutput, PostClassesInput

SINGULAR_CLASS = "singular"
HFEED_CLASS = "hfeed"
MAIN_NAVIGATION_CLASS = "has-main-navigation"
POST_ENTRY_CLASS = "entry"


# --- Pure Functions (Functional Core) ---


def body_classes(
    classes: Iterable[str],
    ctx: PageContext,
    primary_menu_location: str = "primary",
) -> list[str]:
    """
    Add layout classes to the body element.

    Adds `singular` to singular pages and `hfeed` to everything else, then
    `has-main-navigation` when the primary menu location has a menu.
    """
    result = list(classes)
    result.append(SINGULAR_CLASS if ctx.is_singular else HFEED_CLASS)

    if ctx.has_nav_menu(primary_menu_location):
        result.append(MAIN_NAVIGATION_CLASS)

    return result


def post_classes(classes: Iterable[str]) -> list[str]:
    """Add the `entry` class to a post element."""
    result = list(classes)
    result.append(POST_ENTRY_CLASS)
    return result


# --- Component Entry Points ---


def run_body_classes(inp: BodyClassesInput) -> ClassesOutput:
    return ClassesOutput(
        classes=body_classes(inp.classes, inp.context, inp.primary_menu_location),
    )


def run_post_classes(inp: PostClassesInput) -> ClassesOutput:
    return ClassesOutput(classes=post_classes(inp.classes))


def run(inp: BodyClassesInput | PostClassesInput) -> ClassesOutput:
    """Dispatch on input type."""
    if isinstance(inp, BodyClassesInput):
        return run_body_classes(inp)
    return run_post_classes(inp)
