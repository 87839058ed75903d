"""
Unit tests for Icons component.
"""

from __future__ import annotations

from typing import Any

import pytest

from ..component import (
    change_calendar_nav_arrows,
    get_svg,
    normalize_svg,
    run_calendar_arrows,
    run_get_icon,
)
from ..models import CalendarArrowsInput, GetIconInput


class MockFilters:
    """Filters port that swaps in a fixed icon group."""

    def __init__(self, overrides: dict[str, dict[str, str]]) -> None:
        self._overrides = overrides
        self.calls: list[str] = []

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        self.calls.append(name)
        return {**value, **self._overrides.get(name, {})}


class TestGetSvg:
    def test_arrow_right(self) -> None:
        svg = get_svg("arrow_right")
        assert svg.startswith(
            '<svg class="svg-icon" width="24" height="24" '
            'aria-hidden="true" role="img" focusable="false" '
        )
        assert svg.endswith("</svg>")

    def test_single_line_without_gaps_between_tags(self) -> None:
        svg = get_svg("close")
        assert "\n" not in svg
        assert "\t" not in svg
        assert "> <" not in svg

    def test_custom_size(self) -> None:
        svg = get_svg("menu", 32)
        assert 'width="32" height="32"' in svg
        assert 'width="24"' not in svg

    def test_unknown_icon(self) -> None:
        assert get_svg("does-not-exist") == ""

    def test_unknown_group(self) -> None:
        assert get_svg("arrow_right", group="nope") == ""

    def test_social_group(self) -> None:
        svg = get_svg("github", group="social")
        assert svg.startswith('<svg class="svg-icon"')
        assert "<path" in svg

    def test_filter_extends_group(self) -> None:
        filters = MockFilters({"svg_icons_ui": {"star": "<svg viewBox='0 0 1 1'>\n</svg>"}})
        svg = get_svg("star", 16, filters=filters)
        assert svg == (
            '<svg class="svg-icon" width="16" height="16" aria-hidden="true" '
            "role=\"img\" focusable=\"false\" viewBox='0 0 1 1'></svg>"
        )
        assert filters.calls == ["svg_icons_ui"]


class TestNormalizeSvg:
    def test_collapses_whitespace(self) -> None:
        markup = '  <svg viewBox="0 0 2 2">\n\t\t<g>\n\t<path d="M0 0"/>\n</g>\n</svg>  '
        assert normalize_svg(markup, 10) == (
            '<svg class="svg-icon" width="10" height="10" aria-hidden="true" '
            'role="img" focusable="false" viewBox="0 0 2 2"><g><path d="M0 0"/></g></svg>'
        )

    def test_inner_dimensions_untouched(self) -> None:
        markup = '<svg width="5"><rect width="3" height="4"/></svg>'
        assert '<rect width="3" height="4"/>' in normalize_svg(markup, 8)


class TestCalendarArrows:
    @pytest.fixture
    def calendar(self) -> str:
        return (
            '<nav><span class="prev"><a href="/2024/02/">&laquo; Feb</a></span>'
            '<span class="next"><a href="/2024/04/">Apr &raquo;</a></span></nav>'
        )

    def test_replaces_both_arrows(self, calendar: str) -> None:
        out = change_calendar_nav_arrows(calendar)
        assert "&laquo;" not in out
        assert "&raquo;" not in out
        assert out.count('class="svg-icon"') == 2
        assert get_svg("arrow_left") + "Feb" in out
        assert "Apr" + get_svg("arrow_right") in out

    def test_no_arrows_unchanged(self) -> None:
        assert change_calendar_nav_arrows("<table></table>") == "<table></table>"

    def test_run_counts_replacements(self, calendar: str) -> None:
        out = run_calendar_arrows(CalendarArrowsInput(calendar_html=calendar))
        assert out.replaced == 2


class TestRun:
    def test_found(self) -> None:
        out = run_get_icon(GetIconInput(icon="plus"))
        assert out.found
        assert out.warnings == []

    def test_missing(self) -> None:
        out = run_get_icon(GetIconInput(icon="nope"))
        assert not out.found
        assert out.svg == ""
        assert out.warnings
