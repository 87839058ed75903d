"""
Excerpt component - "continue reading" links and untitled fallback.
"""

from .component import (
    CONTINUE_READING_ALLOWED_TAGS,
    continue_reading_link,
    continue_reading_link_excerpt,
    continue_reading_text,
    post_title,
    run,
    run_continue_reading,
    run_post_title,
)
from .models import (
    ContinueReadingInput,
    ContinueReadingOutput,
    MoreLinkStyle,
    PostTitleInput,
    PostTitleOutput,
)

__all__ = [
    # Entry points
    "run",
    "run_continue_reading",
    "run_post_title",
    # Models
    "ContinueReadingInput",
    "ContinueReadingOutput",
    "MoreLinkStyle",
    "PostTitleInput",
    "PostTitleOutput",
    # Functions
    "continue_reading_link",
    "continue_reading_link_excerpt",
    "continue_reading_text",
    "post_title",
    "CONTINUE_READING_ALLOWED_TAGS",
]
