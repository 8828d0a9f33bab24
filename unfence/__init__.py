"""Materialize `file:`-marked fenced blocks from LLM output as real files."""

from .extractor import DEFAULT_FENCE, Extractor, extract_file_entries
from .materializer import Materializer
from .models import FileEntry, RunSummary, WriteOutcome, WriteStatus

__all__ = [
    "DEFAULT_FENCE",
    "Extractor",
    "FileEntry",
    "Materializer",
    "RunSummary",
    "WriteOutcome",
    "WriteStatus",
    "extract_file_entries",
]
