"""
Saved prompt files for JSONP-CLI.
"""

import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .exceptions import PersistenceError
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One saved prompt file."""

    path: Path
    modified: datetime

    @property
    def name(self) -> str:
        return self.path.name


class OutputStore:
    """Writes generated JSON to timestamped files and lists them back."""

    PREFIX = "prompt-"
    SUFFIX = ".json"

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def ensure_directory(self) -> bool:
        """Create the output directory. Returns True if it was created."""
        if self.directory.exists():
            return False
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(str(e))
        logger.info(f"Created output directory: {self.directory}")
        return True

    def _next_path(self) -> Path:
        stamp = int(time.time() * 1000)
        path = self.directory / f"{self.PREFIX}{stamp}{self.SUFFIX}"
        # Two saves inside the same millisecond must not overwrite each other
        while path.exists():
            stamp += 1
            path = self.directory / f"{self.PREFIX}{stamp}{self.SUFFIX}"
        return path

    def save(self, content: str) -> Path:
        """
        Write generated JSON text verbatim.

        Raises:
            PersistenceError: If the directory or file cannot be written
        """
        self.ensure_directory()
        path = self._next_path()
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(str(e))
        logger.info(f"JSON saved to {path}")
        return path

    def list_recent(self, limit: int = 10) -> list[HistoryEntry]:
        """Return saved files, newest first."""
        if not self.directory.is_dir():
            return []
        try:
            files = sorted(
                (p for p in self.directory.iterdir() if p.suffix == self.SUFFIX and p.is_file()),
                key=lambda p: p.name,
                reverse=True,
            )
        except OSError as e:
            raise PersistenceError(str(e))
        return [
            HistoryEntry(path=p, modified=datetime.fromtimestamp(p.stat().st_mtime))
            for p in files[:limit]
        ]
