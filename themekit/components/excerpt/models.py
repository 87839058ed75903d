"""
Excerpt component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from themekit.core.entities import PageContext

MoreLinkStyle = Literal["excerpt", "content"]


@dataclass(frozen=True)
class ContinueReadingInput:
    """Input for building a continue reading link."""

    context: PageContext
    style: MoreLinkStyle = "excerpt"


@dataclass(frozen=True)
class ContinueReadingOutput:
    """
    Continue reading markup.

    html is None in an administrative context, where the host's own
    more-link is left alone.
    """

    html: str | None
    success: bool = True


@dataclass(frozen=True)
class PostTitleInput:
    """Input for the empty-title fallback."""

    title: str


@dataclass(frozen=True)
class PostTitleOutput:
    title: str
    was_untitled: bool = False
    success: bool = True
