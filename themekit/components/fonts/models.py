"""
Fonts component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from themekit.core.entities import SurfaceType


@dataclass(frozen=True)
class FontFallbackInput:
    """Input for generating non-latin font fallback CSS."""

    locale: str
    surface: SurfaceType | str = "front-end"


@dataclass(frozen=True)
class FontFallbackOutput:
    """
    Generated CSS.

    css is "" when the locale has no fallback fonts or the surface has no
    selectors; warnings says which lookup missed.
    """

    css: str
    fonts: list[str] = field(default_factory=list)
    selectors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    success: bool = True
