"""Tests for unfence.prompting."""

from __future__ import annotations

from pathlib import Path

from unfence.extractor import MIDDLE_DOT_FENCE
from unfence.prompting import render_instructions


def test_default_instructions_show_marker_and_fence() -> None:
    text = render_instructions()
    assert "file: `src/types.ts`" in text
    assert "``` ts" in text
    assert text.endswith("\n")


def test_instructions_follow_configured_fence() -> None:
    text = render_instructions(MIDDLE_DOT_FENCE, language="py", example_path="app.py")
    assert "··· py" in text
    assert "file: `app.py`" in text


def test_custom_templates_dir_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "instructions.j2").write_text("Use {{ fence }} blocks.\n", encoding="utf-8")
    assert render_instructions("~~~", templates_dir=tmp_path) == "Use ~~~ blocks.\n"
