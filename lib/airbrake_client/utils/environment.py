"""
Environment Utilities
=====================
Host and runtime information attached to every notice.

Probed once when a notifier is created; the notifier itself never
queries process-global state.
"""

import platform
import socket
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EnvironmentInfo:
    """Host name, OS description and runtime tag of the reporting process."""
    hostname: Optional[str] = None
    os_description: Optional[str] = None
    platform_tag: Optional[str] = None

    @classmethod
    def detect(cls) -> "EnvironmentInfo":
        """
        Probe the current host.

        Returns:
            EnvironmentInfo; fields that cannot be determined are None
        """
        try:
            hostname = socket.gethostname()
        except OSError:
            hostname = None

        return cls(
            hostname=hostname,
            os_description=platform.platform(),
            platform_tag=get_platform_tag(),
        )


def get_platform_tag() -> str:
    """Runtime tag, e.g. 'Python/3.12.1 (CPython)'."""
    return f"Python/{platform.python_version()} ({platform.python_implementation()})"
