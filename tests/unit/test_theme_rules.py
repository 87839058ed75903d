"""
Tests for theme rules loading and validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from themekit.rules.loader import load_rules
from themekit.rules.models import ThemeRules


class TestDefaults:
    def test_defaults(self) -> None:
        rules = ThemeRules()
        assert rules.avatar_size == 60
        assert rules.primary_menu_location == "primary"
        assert rules.icons.default_size == 24
        assert rules.comments.comment_field_rows == 5
        assert rules.styles.dequeue == ["wp-block-library-theme"]
        assert rules.styles.dequeue_priority == 100
        assert rules.fonts.families == {}

    def test_shipped_rules_match_defaults(self, theme_rules: ThemeRules) -> None:
        assert theme_rules == ThemeRules()


class TestLoadRules:
    def test_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(Path("/nonexistent/rules.yaml"))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("invalid: yaml: content: [")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("avatar_size: -1\n")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_empty_file_is_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("")
        assert load_rules(path) == ThemeRules()

    def test_partial_override(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(
            "avatar_size: 48\n"
            "fonts:\n"
            "  families:\n"
            "    ja: [\"'Noto Sans JP'\", sans-serif]\n"
        )
        rules = load_rules(path)
        assert rules.avatar_size == 48
        assert rules.fonts.families == {"ja": ["'Noto Sans JP'", "sans-serif"]}
        assert rules.icons.default_size == 24

    def test_markdown_fenced_block(self, tmp_path: Path) -> None:
        path = tmp_path / "RULES.md"
        path.write_text("# Theme rules\n\n```yaml\navatar_size: 32\n```\n\nNotes.\n")
        assert load_rules(path).avatar_size == 32
