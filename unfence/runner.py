"""End-to-end run: read an input document, extract entries, write them out."""

from __future__ import annotations

from pathlib import Path

from .extractor import Extractor
from .logging import get_logger
from .materializer import Materializer
from .models import RunSummary


class InputNotFoundError(FileNotFoundError):
    """Raised when the input document does not exist."""


def run_from_file(
    input_path: Path | str,
    out_dir: Path | str = ".",
    *,
    extractor: Extractor | None = None,
    encoding: str = "utf-8",
    dry_run: bool = False,
    keep_going: bool = False,
) -> RunSummary:
    """Extract every file block from ``input_path`` and materialize it under ``out_dir``."""
    logger = get_logger("runner")
    input_path = Path(input_path)
    out_dir = Path(out_dir)
    logger.info("Loading input file: %s", input_path)
    logger.info("Output directory: %s", out_dir)

    if not input_path.is_file():
        raise InputNotFoundError(f"File not found: {input_path}")

    text = input_path.read_text(encoding=encoding)
    extractor = extractor or Extractor()
    entries = extractor.extract(text)
    logger.info("Extracted %d files", len(entries))

    materializer = Materializer(
        out_dir, encoding=encoding, dry_run=dry_run, keep_going=keep_going
    )
    summary = RunSummary(
        input_path=input_path,
        out_dir=out_dir,
        outcomes=materializer.materialize(entries),
    )
    logger.info(
        "Finished %s -> %s: %d created, %d skipped, %d planned, %d failed",
        summary.input_path,
        summary.out_dir,
        summary.created,
        summary.skipped,
        summary.planned,
        summary.failed,
    )
    return summary


__all__ = ["InputNotFoundError", "run_from_file"]
