"""
Archive title component - titles for category, tag, author, date and
type archives.

Dispatch order (first matching flag wins):
category, tag, author, year, month, day, post type archive, taxonomy.
Anything else gets the plain default title.

Invariants:
- I1: The translated format string is HTML-escaped, the inserted value is not
- I2: Term, author and date values are wrapped in a page-description span
"""

from __future__ import annotations

from datetime import datetime

from themekit.core.entities import PageContext
from themekit.core.ports.translator import Translator, get_default_translator
from themekit.domain.escape import esc_html
from themekit.domain.text import fill_placeholder
from themekit.rules.models import DateFormatRules

from .models import ArchiveKind, ArchiveTitleInput, ArchiveTitleOutput

DEFAULT_DATE_FORMATS = DateFormatRules()


def page_description(value: str) -> str:
    """Wrap a value in the archive description span."""
    return f'<span class="page-description">{value}</span>'


def format_date(date: datetime | None, fmt: str) -> str:
    """
    Format a date with either a strftime pattern or a str.format template.

    Templates (containing `{`) receive the date as `date`.
    """
    if date is None:
        return ""
    if "{" in fmt:
        return fmt.format(date=date)
    return date.strftime(fmt)


def _format(translator: Translator, message: str, value: str) -> str:
    return fill_placeholder(esc_html(translator.gettext(message)), value)


def resolve_archive_title(
    ctx: PageContext,
    translator: Translator | None = None,
    dates: DateFormatRules | None = None,
) -> tuple[ArchiveKind, str]:
    """Return the archive kind and its formatted title."""
    t = translator or get_default_translator()
    dates = dates or DEFAULT_DATE_FORMATS
    queried = ctx.queried_object
    post_date = ctx.post.date

    if ctx.is_category:
        # Translators: %s: The term title.
        return "category", _format(
            t, "Category Archives: %s", page_description(queried.term_title)
        )

    if ctx.is_tag:
        # Translators: %s: The term title.
        return "tag", _format(t, "Tag Archives: %s", page_description(queried.term_title))

    if ctx.is_author:
        # Translators: %s: The author name.
        return "author", _format(
            t, "Author Archives: %s", page_description(queried.author_display_name)
        )

    if ctx.is_year:
        fmt = t.pgettext("yearly archives date format", dates.yearly)
        # Translators: %s: The year.
        return "year", _format(
            t, "Yearly Archives: %s", page_description(format_date(post_date, fmt))
        )

    if ctx.is_month:
        fmt = t.pgettext("monthly archives date format", dates.monthly)
        # Translators: %s: The month.
        return "month", _format(
            t, "Monthly Archives: %s", page_description(format_date(post_date, fmt))
        )

    if ctx.is_day:
        # Translators: %s: The day.
        return "day", _format(
            t, "Daily Archives: %s", page_description(format_date(post_date, dates.default))
        )

    if ctx.is_post_type_archive:
        # Translators: %s: Post type singular name.
        return "post_type_archive", _format(t, "%s Archives", queried.post_type_singular_name)

    if ctx.is_tax:
        # Translators: %s: Taxonomy singular name.
        return "taxonomy", _format(t, "%s Archives", queried.taxonomy_singular_name)

    return "default", esc_html(t.gettext("Archives:"))


def get_archive_title(
    ctx: PageContext,
    translator: Translator | None = None,
    dates: DateFormatRules | None = None,
) -> str:
    """Filter callback for the archive title."""
    _, title = resolve_archive_title(ctx, translator, dates)
    return title


# --- Component Entry Points ---


def run(
    inp: ArchiveTitleInput,
    *,
    translator: Translator | None = None,
) -> ArchiveTitleOutput:
    """
    Format the archive title for the current page.

    Args:
        inp: Input containing the page context and date formats.
        translator: Optional translator port.

    Returns:
        ArchiveTitleOutput with the title and the matched archive kind.
    """
    kind, title = resolve_archive_title(inp.context, translator, inp.dates)
    return ArchiveTitleOutput(title=title, kind=kind)
