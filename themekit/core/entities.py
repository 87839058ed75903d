"""
Request-scoped entities for themekit.

The host framework answers page-type questions ("is this a category
archive?", "is the primary menu assigned?") from global request state.
Here that state is captured once per request in a PageContext value and
passed explicitly to every helper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

SurfaceType = Literal["front-end", "block-editor", "classic-editor"]

SURFACE_TYPES: tuple[SurfaceType, ...] = ("front-end", "block-editor", "classic-editor")


@dataclass(frozen=True)
class QueriedObject:
    """The object an archive page is about (term, author, post type, taxonomy)."""

    term_title: str = ""
    author_display_name: str = ""
    post_type_singular_name: str = ""
    taxonomy_singular_name: str = ""


@dataclass(frozen=True)
class PostInfo:
    """The current post in the loop."""

    title: str = ""
    permalink: str = ""
    date: datetime | None = None
    content: str = ""
    pings_open: bool = False
    password_required: bool = False
    has_thumbnail: bool = False


@dataclass(frozen=True)
class PageContext:
    """
    Snapshot of the host's request state.

    Archive flags are expected to be mutually exclusive; when several are
    set the archive title helper uses the first one in its dispatch order.
    """

    is_singular: bool = False
    is_admin: bool = False
    is_attachment: bool = False

    # Archive flags
    is_category: bool = False
    is_tag: bool = False
    is_author: bool = False
    is_year: bool = False
    is_month: bool = False
    is_day: bool = False
    is_post_type_archive: bool = False
    is_tax: bool = False

    locale: str = "en-US"
    nav_menus: frozenset[str] = field(default_factory=frozenset)
    queried_object: QueriedObject = field(default_factory=QueriedObject)
    post: PostInfo = field(default_factory=PostInfo)
    pingback_url: str = ""

    def has_nav_menu(self, location: str) -> bool:
        """Whether a menu is assigned to the given theme location."""
        return location in self.nav_menus
