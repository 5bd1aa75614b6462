"""Daily work log files.

One markdown file per calendar date, ``worklog-YYYY-MM-DD.md``, created with a
header on the first entry of the day and grown by whole-file rewrite on every
later entry.

Appends for the same date key are serialised with an in-process lock, so
overlapping calls (the service runs appends in worker threads) cannot lose an
update. Nothing coordinates separate processes writing the same directory;
the last rewrite wins there. A failed rewrite may leave the file truncated.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Union

from ..exceptions import LogStorageError
from .models import RenderedEntry

logger = logging.getLogger(__name__)

FILE_PREFIX = "worklog-"
FILE_SUFFIX = ".md"


def header_for(date_key: str) -> str:
    """Heading line written at the top of a new daily log."""
    return f"# 📝 Work Log - {date_key}"


class DailyLogStore:
    """Maps date keys to daily log files under a fixed directory."""

    def __init__(self, logs_dir: Union[str, Path], encoding: str = "utf-8"):
        self.logs_dir = Path(logs_dir)
        self.encoding = encoding
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def path_for(self, date_key: str) -> Path:
        return self.logs_dir / f"{FILE_PREFIX}{date_key}{FILE_SUFFIX}"

    def _lock_for(self, date_key: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(date_key)
            if lock is None:
                lock = threading.Lock()
                self._locks[date_key] = lock
            return lock

    def append(self, date_key: str, line: str) -> RenderedEntry:
        """Append a rendered line to the log for ``date_key``.

        Creates the directory and the file (with its header) when needed.

        Raises:
            LogStorageError: any filesystem operation failed.
        """
        path = self.path_for(date_key)

        with self._lock_for(date_key):
            self._run("create log directory", path, self.logs_dir.mkdir, parents=True, exist_ok=True)

            is_new_file = not self._run("check daily log file", path, path.exists)
            if is_new_file:
                content = f"{header_for(date_key)}\n\n"
            else:
                content = self._run("read daily log file", path, path.read_text, encoding=self.encoding)
                if content and not content.endswith("\n"):
                    content += "\n"

            content += f"{line}\n"
            self._run("write daily log file", path, path.write_text, content, encoding=self.encoding)

        if is_new_file:
            logger.info("Created daily log %s", path.name)
        logger.debug("Appended entry to %s", path.name)

        return RenderedEntry(line=line, is_new_file=is_new_file, path=path)

    @staticmethod
    def _run(operation: str, path: Path, func, *args, **kwargs):
        try:
            return func(*args, **kwargs)
        except OSError as e:
            reason = e.strerror or e.__class__.__name__
            logger.error("Daily log %s failed for %s: %s", operation, path, reason)
            raise LogStorageError(operation, reason, path=str(path)) from e
