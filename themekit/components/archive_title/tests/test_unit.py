"""
Unit tests for Archive title component.

Tests:
- Each archive flag in isolation produces its exact title
- Default title when no flag is set
- Dispatch order when several flags are set
- Translated format strings are escaped, values are not
"""

from __future__ import annotations

from datetime import datetime

import pytest

from themekit.core.entities import PageContext, PostInfo, QueriedObject
from themekit.rules.models import DateFormatRules

from ..component import format_date, get_archive_title, run
from ..models import ArchiveTitleInput

# --- Test Fixtures ---


class MockTranslator:
    """Translator that maps selected messages and records lookups."""

    def __init__(self, messages: dict[str, str] | None = None) -> None:
        self._messages = messages or {}
        self.contexts: list[str] = []

    def gettext(self, message: str) -> str:
        return self._messages.get(message, message)

    def pgettext(self, context: str, message: str) -> str:
        self.contexts.append(context)
        return self._messages.get(message, message)


@pytest.fixture
def queried() -> QueriedObject:
    return QueriedObject(
        term_title="News",
        author_display_name="Ada Lovelace",
        post_type_singular_name="Book",
        taxonomy_singular_name="Genre",
    )


@pytest.fixture
def post() -> PostInfo:
    return PostInfo(title="Hello", date=datetime(2024, 3, 5, 9, 30))


def _ctx(queried: QueriedObject, post: PostInfo, **flags: bool) -> PageContext:
    return PageContext(queried_object=queried, post=post, **flags)


# --- Dispatch ---


class TestArchiveTitle:
    @pytest.mark.parametrize(
        ("flag", "expected"),
        [
            ("is_category", 'Category Archives: <span class="page-description">News</span>'),
            ("is_tag", 'Tag Archives: <span class="page-description">News</span>'),
            (
                "is_author",
                'Author Archives: <span class="page-description">Ada Lovelace</span>',
            ),
            ("is_year", 'Yearly Archives: <span class="page-description">2024</span>'),
            ("is_month", 'Monthly Archives: <span class="page-description">March 2024</span>'),
            ("is_day", 'Daily Archives: <span class="page-description">March 5, 2024</span>'),
            ("is_post_type_archive", "Book Archives"),
            ("is_tax", "Genre Archives"),
        ],
    )
    def test_single_flag(
        self, queried: QueriedObject, post: PostInfo, flag: str, expected: str
    ) -> None:
        ctx = _ctx(queried, post, **{flag: True})
        assert get_archive_title(ctx) == expected

    def test_default_title(self, queried: QueriedObject, post: PostInfo) -> None:
        assert get_archive_title(_ctx(queried, post)) == "Archives:"

    def test_category_wins_over_tag(self, queried: QueriedObject, post: PostInfo) -> None:
        ctx = _ctx(queried, post, is_category=True, is_tag=True)
        assert get_archive_title(ctx).startswith("Category Archives:")

    def test_year_wins_over_month(self, queried: QueriedObject, post: PostInfo) -> None:
        ctx = _ctx(queried, post, is_year=True, is_month=True)
        assert get_archive_title(ctx).startswith("Yearly Archives:")

    def test_missing_date_renders_empty_span(self, queried: QueriedObject) -> None:
        ctx = PageContext(is_year=True, queried_object=queried)
        assert get_archive_title(ctx) == (
            'Yearly Archives: <span class="page-description"></span>'
        )


class TestTranslation:
    def test_translated_format(self, queried: QueriedObject, post: PostInfo) -> None:
        translator = MockTranslator({"Tag Archives: %s": "Archives des étiquettes : %s"})
        ctx = _ctx(queried, post, is_tag=True)
        assert get_archive_title(ctx, translator) == (
            'Archives des étiquettes : <span class="page-description">News</span>'
        )

    def test_translation_without_placeholder(
        self, queried: QueriedObject, post: PostInfo
    ) -> None:
        translator = MockTranslator({"Tag Archives: %s": "Tags"})
        assert get_archive_title(_ctx(queried, post, is_tag=True), translator) == "Tags"

    def test_translation_with_literal_percent(
        self, queried: QueriedObject, post: PostInfo
    ) -> None:
        translator = MockTranslator({"Author Archives: %s": "100% %s"})
        assert get_archive_title(_ctx(queried, post, is_author=True), translator) == (
            '100% <span class="page-description">Ada Lovelace</span>'
        )

    def test_translated_format_is_escaped(self, queried: QueriedObject, post: PostInfo) -> None:
        translator = MockTranslator({"Archives:": "<b>Archives</b>"})
        assert get_archive_title(_ctx(queried, post), translator) == (
            "&lt;b&gt;Archives&lt;/b&gt;"
        )

    def test_date_format_context(self, queried: QueriedObject, post: PostInfo) -> None:
        translator = MockTranslator({"%B %Y": "%m/%Y"})
        ctx = _ctx(queried, post, is_month=True)
        assert get_archive_title(ctx, translator) == (
            'Monthly Archives: <span class="page-description">03/2024</span>'
        )
        assert translator.contexts == ["monthly archives date format"]

    def test_configured_date_formats(self, queried: QueriedObject, post: PostInfo) -> None:
        dates = DateFormatRules(default="{date:%Y-%m-%d}")
        ctx = _ctx(queried, post, is_day=True)
        assert get_archive_title(ctx, dates=dates) == (
            'Daily Archives: <span class="page-description">2024-03-05</span>'
        )


class TestFormatDate:
    def test_strftime_pattern(self) -> None:
        assert format_date(datetime(2020, 1, 2), "%Y") == "2020"

    def test_template(self) -> None:
        assert format_date(datetime(2020, 1, 2), "{date.day}/{date.month}") == "2/1"

    def test_none(self) -> None:
        assert format_date(None, "%Y") == ""


class TestRun:
    def test_run_reports_kind(self, queried: QueriedObject, post: PostInfo) -> None:
        out = run(ArchiveTitleInput(context=_ctx(queried, post, is_tax=True)))
        assert out.kind == "taxonomy"
        assert out.title == "Genre Archives"
        assert out.success

    def test_run_default(self) -> None:
        out = run(ArchiveTitleInput(context=PageContext()))
        assert out.kind == "default"
        assert out.title == "Archives:"
