"""
File Logger
===========
Appends notification outcomes to a text file.

Line format:
    2026-01-01T12:00:00+00:00 Status: success, Id: 42, Url: https://airbrake.io/...
    2026-01-01T12:00:01+00:00 Error: ConnectionError: connection refused
"""

import threading
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Union

from .base import BaseLogger

if TYPE_CHECKING:
    from ..notifications.response import AirbrakeResponse


class FileLogger(BaseLogger):
    """Thread-safe append-only file sink."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def log_response(self, response: "AirbrakeResponse") -> None:
        parts = [f"Status: {response.status.value}"]
        if response.id:
            parts.append(f"Id: {response.id}")
        if response.url:
            parts.append(f"Url: {response.url}")
        if response.message:
            parts.append(f"Message: {response.message}")
        self._write(", ".join(parts))

    def log_exception(self, exception: BaseException) -> None:
        details = "".join(traceback.format_exception_only(type(exception), exception)).strip()
        self._write(f"Error: {details}")

    def _write(self, message: str) -> None:
        timestamp = datetime.now(timezone.utc).isoformat(timespec='seconds')
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('a', encoding='utf-8') as fp:
                fp.write(f"{timestamp} {message}\n")
