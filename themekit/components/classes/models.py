"""
Classes component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from themekit.core.entities import PageContext


@dataclass(frozen=True)
class BodyClassesInput:
    """Input for augmenting the body element's class list."""

    classes: tuple[str, ...]
    context: PageContext
    primary_menu_location: str = "primary"


@dataclass(frozen=True)
class PostClassesInput:
    """Input for augmenting a post element's class list."""

    classes: tuple[str, ...]


@dataclass(frozen=True)
class ClassesOutput:
    """Output containing the augmented class list."""

    classes: list[str] = field(default_factory=list)
    success: bool = True
