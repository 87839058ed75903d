"""
Tests for the themekit CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from themekit.app_shell.cli import main

DOC = (
    '<!-- wp:image {"id":1} --><figure>a</figure><!-- /wp:image -->'
    '<!-- wp:image {"id":2} --><figure>b</figure><!-- /wp:image -->'
)


def test_font_css(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["font-css", "--locale", "ja"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("body,input,")
    assert "sans-serif" in out


def test_font_css_unknown_locale(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["font-css", "--locale", "xx-XX"]) == 0
    assert capsys.readouterr().out == ""


def test_font_css_rejects_unknown_surface() -> None:
    with pytest.raises(SystemExit):
        main(["font-css", "--locale", "ja", "--surface", "mobile"])


def test_icon(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["icon", "arrow_left", "--size", "18"]) == 0
    assert 'width="18" height="18"' in capsys.readouterr().out


def test_unknown_icon() -> None:
    assert main(["icon", "nope"]) == 1


def test_first_block(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = tmp_path / "post.html"
    doc.write_text(DOC)
    assert main(["first-block", "core/image", str(doc)]) == 0
    assert capsys.readouterr().out == "<figure>a</figure>\n"


def test_first_block_no_match(tmp_path: Path) -> None:
    doc = tmp_path / "post.html"
    doc.write_text(DOC)
    assert main(["first-block", "core/gallery", str(doc)]) == 1


def test_invalid_rules_file(tmp_path: Path) -> None:
    rules = tmp_path / "rules.yaml"
    rules.write_text("avatar_size: nope\n")
    with pytest.raises(SystemExit) as exc:
        main(["--rules", str(rules), "icon", "menu"])
    assert exc.value.code == 1


def test_first_block_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["first-block", "core/image", str(tmp_path / "missing.html")])
    assert exc.value.code == 1


def test_first_block_undecodable_file(tmp_path: Path) -> None:
    doc = tmp_path / "post.html"
    doc.write_bytes(b"\xff\xfe<!-- wp:image -->\x81<!-- /wp:image -->")
    with pytest.raises(SystemExit) as exc:
        main(["first-block", "core/image", str(doc)])
    assert exc.value.code == 1
