"""
Base Logger
===========
Sink for notification outcomes, called by AirbrakeNotifier.notify().
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..notifications.response import AirbrakeResponse


class BaseLogger(ABC):
    """
    Receives the outcome of each fire-and-forget notification.

    Implementations should be thread-safe: outcomes are delivered from
    the notifier's worker threads.
    """

    @abstractmethod
    def log_response(self, response: "AirbrakeResponse") -> None:
        """Record a completed notification."""
        pass

    @abstractmethod
    def log_exception(self, exception: BaseException) -> None:
        """Record a notification that failed."""
        pass
