"""
Archive title component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from themekit.core.entities import PageContext
from themekit.rules.models import DateFormatRules

ArchiveKind = Literal[
    "category",
    "tag",
    "author",
    "year",
    "month",
    "day",
    "post_type_archive",
    "taxonomy",
    "default",
]


@dataclass(frozen=True)
class ArchiveTitleInput:
    """Input for formatting the archive page title."""

    context: PageContext
    dates: DateFormatRules | None = None


@dataclass(frozen=True)
class ArchiveTitleOutput:
    """Formatted archive title and the page kind that produced it."""

    title: str
    kind: ArchiveKind
    success: bool = True
