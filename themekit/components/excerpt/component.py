"""
Excerpt component - "continue reading" links and the untitled fallback.

Invariants:
- I1: No link is produced in an administrative context
- I2: The permalink is URL-escaped; the post title is wrapped in a
  screen-reader-only span
- I3: A title is replaced only when it is exactly the empty string
"""

from __future__ import annotations

from themekit.core.entities import PageContext
from themekit.core.ports.translator import Translator, get_default_translator
from themekit.domain.escape import esc_html, esc_url, kses
from themekit.domain.text import fill_placeholder

from .models import (
    ContinueReadingInput,
    ContinueReadingOutput,
    PostTitleInput,
    PostTitleOutput,
)

SCREEN_READER_SPAN = '<span class="screen-reader-text">{title}</span>'

# Markup the translated "continue reading" format may keep
CONTINUE_READING_ALLOWED_TAGS: dict[str, frozenset[str]] = {"span": frozenset({"class"})}


def post_title(title: str, translator: Translator | None = None) -> str:
    """Give posts without a title a placeholder one."""
    if title == "":
        t = translator or get_default_translator()
        return esc_html(t.gettext("Untitled"))
    return title


def continue_reading_text(ctx: PageContext, translator: Translator | None = None) -> str:
    """Build `Continue reading <span class="screen-reader-text">Title</span>`."""
    t = translator or get_default_translator()
    # Translators: %s: Name of current post.
    fmt = kses(esc_html(t.gettext("Continue reading %s")), CONTINUE_READING_ALLOWED_TAGS)
    title = post_title(ctx.post.title, t)
    return fill_placeholder(fmt, SCREEN_READER_SPAN.format(title=title))


def _more_link(ctx: PageContext, translator: Translator | None) -> str:
    href = esc_url(ctx.post.permalink)
    text = continue_reading_text(ctx, translator)
    return f'<a class="more-link" href="{href}">{text}</a>'


def continue_reading_link_excerpt(
    ctx: PageContext, translator: Translator | None = None
) -> str | None:
    """More link appended to automatically generated excerpts."""
    if ctx.is_admin:
        return None
    return "&hellip; " + _more_link(ctx, translator)


def continue_reading_link(ctx: PageContext, translator: Translator | None = None) -> str | None:
    """More link that replaces the content's <!--more--> tag."""
    if ctx.is_admin:
        return None
    return f'<div class="more-link-container">{_more_link(ctx, translator)}</div>'


# --- Component Entry Points ---


def run_continue_reading(
    inp: ContinueReadingInput,
    *,
    translator: Translator | None = None,
) -> ContinueReadingOutput:
    """
    Build the continue reading link in the requested style.

    Args:
        inp: Page context and link style ("excerpt" or "content").
        translator: Optional translator port.
    """
    if inp.style == "excerpt":
        html = continue_reading_link_excerpt(inp.context, translator)
    else:
        html = continue_reading_link(inp.context, translator)
    return ContinueReadingOutput(html=html)


def run_post_title(
    inp: PostTitleInput,
    *,
    translator: Translator | None = None,
) -> PostTitleOutput:
    title = post_title(inp.title, translator)
    return PostTitleOutput(title=title, was_untitled=inp.title == "")


run = run_continue_reading
