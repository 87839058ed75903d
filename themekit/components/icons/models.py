"""
Icons component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GetIconInput:
    """Input for looking up an SVG icon."""

    icon: str
    size: int = 24
    group: str = "ui"


@dataclass(frozen=True)
class GetIconOutput:
    """Output containing normalized SVG markup ("" when unknown)."""

    svg: str
    found: bool
    warnings: list[str] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class CalendarArrowsInput:
    """Input for replacing calendar navigation arrows."""

    calendar_html: str
    size: int = 24


@dataclass(frozen=True)
class CalendarArrowsOutput:
    calendar_html: str
    replaced: int = 0
    success: bool = True
