"""A process-wide logger that appends lines to a single file."""

from __future__ import annotations

import sys
import threading
from typing import ClassVar, TextIO


class FileLogger:
    """Appends messages to one log file; obtain it through ``get_instance``."""

    _instance: ClassVar[FileLogger | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, log_file: str) -> None:
        self.log_file = log_file
        self._write_lock = threading.Lock()
        self._stream: TextIO | None
        try:
            self._stream = open(log_file, "a", encoding="utf-8")
        except OSError:
            self._stream = None
            print(f"Failed to open log file: {log_file}", file=sys.stderr)

    @classmethod
    def get_instance(cls, log_file: str) -> FileLogger:
        """Return the shared logger, opening ``log_file`` on the first call only."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(log_file)
            return cls._instance

    @property
    def is_open(self) -> bool:
        """Whether the log file could be opened."""
        return self._stream is not None and not self._stream.closed

    def log(self, message: str) -> None:
        """Append ``message`` as one line; does nothing if the file is not open."""
        with self._write_lock:
            if self._stream is None or self._stream.closed:
                return
            self._stream.write(f"{message}\n")
            self._stream.flush()

    @classmethod
    def _reset(cls) -> None:
        with cls._instance_lock:
            if cls._instance is not None and cls._instance._stream is not None:
                cls._instance._stream.close()
            cls._instance = None