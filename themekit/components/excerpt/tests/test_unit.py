"""
Unit tests for Excerpt component.
"""

from __future__ import annotations

import pytest

from themekit.core.entities import PageContext, PostInfo

from ..component import (
    continue_reading_link,
    continue_reading_link_excerpt,
    continue_reading_text,
    post_title,
    run_continue_reading,
    run_post_title,
)
from ..models import ContinueReadingInput, PostTitleInput


class MockTranslator:
    def __init__(self, messages: dict[str, str]) -> None:
        self._messages = messages

    def gettext(self, message: str) -> str:
        return self._messages.get(message, message)

    def pgettext(self, context: str, message: str) -> str:
        return self.gettext(message)


@pytest.fixture
def ctx() -> PageContext:
    return PageContext(
        post=PostInfo(title="Hello World", permalink="https://example.com/?p=1&preview=true"),
    )


SR_TEXT = 'Continue reading <span class="screen-reader-text">Hello World</span>'


class TestContinueReadingText:
    def test_text(self, ctx: PageContext) -> None:
        assert continue_reading_text(ctx) == SR_TEXT

    def test_untitled_post(self) -> None:
        ctx = PageContext(post=PostInfo(title=""))
        assert continue_reading_text(ctx) == (
            'Continue reading <span class="screen-reader-text">Untitled</span>'
        )

    def test_translated_markup_is_escaped(self, ctx: PageContext) -> None:
        translator = MockTranslator({"Continue reading %s": "<em>Lire</em> %s"})
        text = continue_reading_text(ctx, translator)
        assert text.startswith("&lt;em&gt;Lire&lt;/em&gt; ")
        assert "<em>" not in text

    def test_translation_with_literal_percent(self, ctx: PageContext) -> None:
        translator = MockTranslator({"Continue reading %s": "Lire 100% %s"})
        assert continue_reading_text(ctx, translator) == (
            'Lire 100% <span class="screen-reader-text">Hello World</span>'
        )

    def test_translation_without_placeholder(self, ctx: PageContext) -> None:
        translator = MockTranslator({"Continue reading %s": "Lire la suite"})
        assert continue_reading_text(ctx, translator) == "Lire la suite"


class TestMoreLinks:
    def test_excerpt_link(self, ctx: PageContext) -> None:
        assert continue_reading_link_excerpt(ctx) == (
            '&hellip; <a class="more-link" '
            'href="https://example.com/?p=1&#038;preview=true">' + SR_TEXT + "</a>"
        )

    def test_content_link(self, ctx: PageContext) -> None:
        assert continue_reading_link(ctx) == (
            '<div class="more-link-container"><a class="more-link" '
            'href="https://example.com/?p=1&#038;preview=true">' + SR_TEXT + "</a></div>"
        )

    def test_admin_context_returns_none(self) -> None:
        ctx = PageContext(is_admin=True, post=PostInfo(title="x", permalink="https://e.com/"))
        assert continue_reading_link_excerpt(ctx) is None
        assert continue_reading_link(ctx) is None

    def test_unsafe_permalink_dropped(self) -> None:
        ctx = PageContext(post=PostInfo(title="x", permalink="javascript:alert(1)"))
        assert 'href=""' in continue_reading_link(ctx)

    def test_run_styles(self, ctx: PageContext) -> None:
        excerpt = run_continue_reading(ContinueReadingInput(context=ctx))
        content = run_continue_reading(ContinueReadingInput(context=ctx, style="content"))
        assert excerpt.html is not None and excerpt.html.startswith("&hellip; ")
        assert content.html is not None and content.html.startswith("<div")


class TestPostTitle:
    def test_empty_title(self) -> None:
        assert post_title("") == "Untitled"

    def test_non_empty_title_unchanged(self) -> None:
        assert post_title("A <b>bold</b> title") == "A <b>bold</b> title"

    def test_whitespace_title_unchanged(self) -> None:
        assert post_title(" ") == " "

    def test_run(self) -> None:
        out = run_post_title(PostTitleInput(title=""))
        assert out.title == "Untitled"
        assert out.was_untitled
