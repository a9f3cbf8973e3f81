"""Persistent record store.

Every new best layout is saved as a maze text file under
``maze_outputs/archive/maze_record_<score>.txt``, the latest best is mirrored
to ``maze_outputs/best_record.txt`` and a ``Record: <score>`` line is appended
to ``maze_outputs/archive/records_log.txt``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol

from ..core.models import Record
from ..io.maze_format import format_maze
from ..utils.logger import get_logger
from .layout import MazeLayout


LOGGER = get_logger(__name__)

DEFAULT_OUTPUT_DIR = Path("maze_outputs")
ARCHIVE_DIRNAME = "archive"
LATEST_BEST_FILENAME = "best_record.txt"
RECORDS_LOG_FILENAME = "records_log.txt"
ARCHIVE_FILENAME_PREFIX = "maze_record_"


class RecordSink(Protocol):
    def record(self, layout: MazeLayout, score: int) -> None:
        """Receive a layout whose score beats every earlier score of the run."""


class NullRecordSink:
    """Sink that drops every record."""

    def record(self, layout: MazeLayout, score: int) -> None:
        return None


class RecordingSink:
    """Keeps records in memory, in the order they were reported."""

    def __init__(self) -> None:
        self.records: List[Record] = []

    def record(self, layout: MazeLayout, score: int) -> None:
        self.records.append(Record(layout=layout, score=score))

    @property
    def scores(self) -> List[int]:
        return [entry.score for entry in self.records]


class RecordStore:
    """Save record layouts as maze text files.

    Write failures are logged and swallowed so a full disk or a removed
    directory never stops a running search.
    """

    def __init__(self, output_dir: Path | str = DEFAULT_OUTPUT_DIR) -> None:
        self.output_dir = Path(output_dir)
        self.archive_dir = self.output_dir / ARCHIVE_DIRNAME
        self.archive_dir.mkdir(parents=True, exist_ok=True)

    @property
    def best_path(self) -> Path:
        return self.output_dir / LATEST_BEST_FILENAME

    @property
    def log_path(self) -> Path:
        return self.archive_dir / RECORDS_LOG_FILENAME

    def archive_path(self, score: int) -> Path:
        return self.archive_dir / f"{ARCHIVE_FILENAME_PREFIX}{score}.txt"

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def record(self, layout: MazeLayout, score: int) -> None:
        text = format_maze(layout)
        try:
            self.archive_path(score).write_text(text, encoding="utf-8")
            self.best_path.write_text(text, encoding="utf-8")
            # Logged last so every log line has its maze file.
            with self.log_path.open("a", encoding="utf-8") as handle:
                handle.write(f"Record: {score}\n")
        except OSError as exc:
            LOGGER.warning("Failed to persist record %s: %s", score, exc)
            return
        LOGGER.debug("Record %s saved to %s", score, self.archive_path(score))
