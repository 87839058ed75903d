"""
Head component - pingback link, comment form, thumbnails, avatars, styles.
"""

from .component import (
    DEFAULT_AVATAR_SIZE,
    DEFAULT_COMMENT_ROWS,
    THEME_BLOCK_STYLES,
    THUMBNAIL_FILTER,
    can_show_post_thumbnail,
    comment_form_defaults,
    deregister_styles,
    get_avatar_size,
    pingback_header,
    run,
    run_comment_form,
    run_head,
)
from .models import (
    CommentFormInput,
    CommentFormOutput,
    HeadInput,
    HeadOutput,
    StyleQueue,
)
from .ports import StyleQueuePort

__all__ = [
    # Entry points
    "run",
    "run_comment_form",
    "run_head",
    # Models
    "CommentFormInput",
    "CommentFormOutput",
    "HeadInput",
    "HeadOutput",
    "StyleQueue",
    "StyleQueuePort",
    # Functions
    "can_show_post_thumbnail",
    "comment_form_defaults",
    "deregister_styles",
    "get_avatar_size",
    "pingback_header",
    # Constants
    "DEFAULT_AVATAR_SIZE",
    "DEFAULT_COMMENT_ROWS",
    "THEME_BLOCK_STYLES",
    "THUMBNAIL_FILTER",
]
