from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.document_builder import DocumentBuilder
from unfence.logging import reset_logging


@pytest.fixture
def document_builder() -> DocumentBuilder:
    """Provide a builder for LLM-style multi-file answers."""
    return DocumentBuilder()


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def _reset_unfence_logger():
    """Undo configure_logging() so caplog sees records in every test."""
    yield
    reset_logging()
