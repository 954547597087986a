"""
Airbrake Response
=================
Result of one notification attempt.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class RequestStatus(Enum):
    """Terminal status of a notification that did not fail."""
    SUCCESS = "success"              # Airbrake accepted the notice (201)
    REQUEST_ERROR = "request_error"  # Airbrake answered with another status
    IGNORED = "ignored"              # Suppressed by environment or filter


@dataclass
class AirbrakeResponse:
    """
    Parsed Airbrake response.

    id and url identify an accepted notice; message carries the reason
    of a rejection.
    """
    status: RequestStatus
    id: Optional[str] = None
    url: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def ignored(cls) -> "AirbrakeResponse":
        return cls(status=RequestStatus.IGNORED)

    @classmethod
    def from_body(
        cls,
        body: Union[bytes, str],
        status: RequestStatus,
    ) -> "AirbrakeResponse":
        """
        Parse an Airbrake JSON response body.

        Args:
            body: Raw response body (empty body gives an empty response)
            status: Status derived from the HTTP status code

        Returns:
            AirbrakeResponse instance

        Raises:
            ValueError: If the body is not a JSON object
        """
        if isinstance(body, bytes):
            body = body.decode('utf-8')

        if not body.strip():
            return cls(status=status)

        data = json.loads(body)
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected Airbrake response body: {body[:200]}")

        return cls(
            status=status,
            id=_as_text(data.get('id')),
            url=_as_text(data.get('url')),
            message=_as_text(data.get('message')),
        )


def _as_text(value) -> Optional[str]:
    return None if value is None else str(value)
