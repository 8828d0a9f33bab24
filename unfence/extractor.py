"""Scan text for `file:` markers followed by fenced blocks."""

from __future__ import annotations

import re
from typing import Iterator, List, Pattern

from .logging import get_logger
from .models import FileEntry

DEFAULT_FENCE = "```"
MIDDLE_DOT_FENCE = "···"

_MARKER = "file:"


def build_pattern(fence: str) -> Pattern[str]:
    """Compile the `file:` + fenced block pattern for ``fence``."""
    if not fence:
        raise ValueError("fence delimiter must not be empty")
    escaped = re.escape(fence)
    return re.compile(
        re.escape(_MARKER)
        + r"\s*(?P<path>[^\n]+?)\s*\n"
        + escaped
        + r"[^\n]*\n(?P<content>.*?)(?:\n|^)"
        + escaped,
        re.DOTALL | re.MULTILINE,
    )


def clean_path(token: str, fence: str = DEFAULT_FENCE) -> str:
    """Strip whitespace and stray fence characters around a path token.

    Backticks and every character of ``fence`` are removed from both ends, so with
    a `~~~` fence a path like `backup~` comes back as `backup`.
    """
    strip_chars = "".join(sorted(set(fence) | {"`"}))
    return token.strip().strip(strip_chars).strip()


class Extractor:
    """Pulls FileEntry records out of a text blob in document order."""

    def __init__(self, fence: str = DEFAULT_FENCE) -> None:
        self.fence = fence
        self._pattern = build_pattern(fence)
        self.logger = get_logger("extractor")

    def iter_entries(self, text: str) -> Iterator[FileEntry]:
        normalized = text.replace("\r\n", "\n")
        for match in self._pattern.finditer(normalized):
            path = clean_path(match.group("path"), self.fence)
            if not path:
                self.logger.debug("Ignoring block with empty path at offset %d", match.start())
                continue
            yield FileEntry(path=path, content=match.group("content").strip())

    def extract(self, text: str) -> List[FileEntry]:
        return list(self.iter_entries(text))


def extract_file_entries(text: str, fence: str = DEFAULT_FENCE) -> List[FileEntry]:
    """Convenience wrapper returning every entry found in ``text``."""
    return Extractor(fence).extract(text)


__all__ = [
    "DEFAULT_FENCE",
    "MIDDLE_DOT_FENCE",
    "Extractor",
    "build_pattern",
    "clean_path",
    "extract_file_entries",
]
