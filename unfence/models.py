"""Data models shared by the extractor, materializer and runner."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class FileEntry:
    """A file block pulled out of an input document."""

    path: str
    content: str


class WriteStatus(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"
    PLANNED = "planned"
    FAILED = "failed"


@dataclass
class WriteOutcome:
    """What happened to a single entry during materialization."""

    entry: FileEntry
    target: Path
    status: WriteStatus
    error: Optional[str] = None


@dataclass
class RunSummary:
    """Aggregated result of one extract-and-write run."""

    input_path: Path
    out_dir: Path
    outcomes: List[WriteOutcome] = field(default_factory=list)

    @property
    def extracted(self) -> int:
        return len(self.outcomes)

    @property
    def created(self) -> int:
        return self._count(WriteStatus.CREATED)

    @property
    def skipped(self) -> int:
        return self._count(WriteStatus.SKIPPED)

    @property
    def planned(self) -> int:
        return self._count(WriteStatus.PLANNED)

    @property
    def failed(self) -> int:
        return self._count(WriteStatus.FAILED)

    def _count(self, status: WriteStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)
