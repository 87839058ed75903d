"""
Head component - small page-level helpers.

- pingback auto-discovery link for singular pages with pings open
- comment form textarea height
- post thumbnail visibility
- avatar size
- dequeue of the host's theme block styles
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from themekit.core.entities import PageContext
from themekit.core.ports.hooks import FiltersPort
from themekit.domain.escape import esc_url

from .models import CommentFormInput, CommentFormOutput, HeadInput, HeadOutput
from .ports import StyleQueuePort

DEFAULT_AVATAR_SIZE = 60
DEFAULT_COMMENT_ROWS = 5
THEME_BLOCK_STYLES = ("wp-block-library-theme",)

THUMBNAIL_FILTER = "can_show_post_thumbnail"

ROWS_PATTERN = re.compile(r'rows="\d+"')


def pingback_header(ctx: PageContext) -> str:
    """Pingback discovery link for singular posts, pages or attachments."""
    if ctx.is_singular and ctx.post.pings_open:
        return f'<link rel="pingback" href="{esc_url(ctx.pingback_url)}">'
    return ""


def comment_form_defaults(
    defaults: dict[str, Any],
    rows: int = DEFAULT_COMMENT_ROWS,
) -> dict[str, Any]:
    """Set the comment textarea height. Returns a new dict."""
    result = dict(defaults)
    field = result.get("comment_field")
    if isinstance(field, str):
        result["comment_field"] = ROWS_PATTERN.sub(f'rows="{rows:d}"', field)
    return result


def can_show_post_thumbnail(ctx: PageContext, filters: FiltersPort | None = None) -> bool:
    """Whether the post thumbnail can be displayed."""
    post = ctx.post
    can_show = not post.password_required and not ctx.is_attachment and post.has_thumbnail
    if filters is not None:
        can_show = bool(filters.apply_filters(THUMBNAIL_FILTER, can_show))
    return can_show


def get_avatar_size(size: int = DEFAULT_AVATAR_SIZE) -> int:
    """Avatar size in pixels."""
    return size


def deregister_styles(
    queue: StyleQueuePort,
    handles: Iterable[str] = THEME_BLOCK_STYLES,
) -> None:
    """Remove the host's theme block styles from the queue."""
    for handle in handles:
        queue.dequeue(handle)


# --- Component Entry Points ---


def run_head(inp: HeadInput) -> HeadOutput:
    return HeadOutput(html=pingback_header(inp.context))


def run_comment_form(inp: CommentFormInput) -> CommentFormOutput:
    return CommentFormOutput(defaults=comment_form_defaults(inp.defaults, inp.rows))


run = run_head
