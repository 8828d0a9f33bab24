"""Write extracted entries to disk without clobbering existing files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .logging import get_logger
from .models import FileEntry, WriteOutcome, WriteStatus


class Materializer:
    """Creates one file per entry under ``root``, skipping paths that already exist.

    Entries are handled in order. By default the first I/O error aborts the run;
    with ``keep_going`` the error is logged, recorded as a failed outcome and the
    remaining entries are still processed.
    """

    def __init__(
        self,
        root: Path | str = ".",
        *,
        encoding: str = "utf-8",
        dry_run: bool = False,
        keep_going: bool = False,
    ) -> None:
        self.root = Path(root)
        self.encoding = encoding
        self.dry_run = dry_run
        self.keep_going = keep_going
        self.logger = get_logger("materializer")

    def resolve(self, entry: FileEntry) -> Path:
        """Return the destination of ``entry`` joined under the root."""
        # Leading separators are dropped so "/etc/x" lands at root/etc/x.
        relative = entry.path.lstrip("/\\")
        return self.root / relative

    def materialize(self, entries: Iterable[FileEntry]) -> List[WriteOutcome]:
        return [self.write(entry) for entry in entries]

    def write(self, entry: FileEntry) -> WriteOutcome:
        target = self.resolve(entry)
        if self.dry_run:
            return self._plan(entry, target)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return self._fail(entry, target, exc)
        try:
            # Exclusive create: an existing file is never opened for writing.
            with target.open("x", encoding=self.encoding, newline="") as handle:
                handle.write(entry.content)
        except FileExistsError:
            self.logger.warning("File already exists: %s", target)
            return WriteOutcome(entry=entry, target=target, status=WriteStatus.SKIPPED)
        except OSError as exc:
            return self._fail(entry, target, exc)
        self.logger.info("Created file: %s", target)
        return WriteOutcome(entry=entry, target=target, status=WriteStatus.CREATED)

    def _fail(self, entry: FileEntry, target: Path, exc: OSError) -> WriteOutcome:
        if not self.keep_going:
            raise exc
        self.logger.error("Failed to write %s: %s", target, exc)
        return WriteOutcome(entry=entry, target=target, status=WriteStatus.FAILED, error=str(exc))

    def _plan(self, entry: FileEntry, target: Path) -> WriteOutcome:
        if target.exists():
            self.logger.warning("File already exists: %s", target)
            return WriteOutcome(entry=entry, target=target, status=WriteStatus.SKIPPED)
        self.logger.info("Would create file: %s", target)
        return WriteOutcome(entry=entry, target=target, status=WriteStatus.PLANNED)


__all__ = ["Materializer"]
