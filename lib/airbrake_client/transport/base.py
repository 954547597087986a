"""
Airbrake Client - Base HTTP Transport
=====================================
Abstract request handler, request and response used by the notifier.

The notifier never talks to the network directly. It asks a request
handler for a fresh request per notice, writes the body and reads the
response through these interfaces, so tests and alternative transports
only need to implement them.

Typical workflow (as run by AirbrakeNotifier):
    request = handler.get()
    request.method = "POST"
    request.content_type = "application/json"
    request.accept = "application/json"

    with request.get_request_stream() as stream:
        stream.write(body)

    response = request.get_response()
    try:
        status = response.status_code
        data = response.get_response_stream().read()
    finally:
        response.close()
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional


class BaseHttpResponse(ABC):
    """Response returned by a request; released with close()."""

    @property
    @abstractmethod
    def status_code(self) -> int:
        """HTTP status code of the response."""
        pass

    @abstractmethod
    def get_response_stream(self) -> BinaryIO:
        """
        Get the response body.

        Returns:
            Readable binary stream positioned at the start of the body
        """
        pass

    def close(self) -> None:
        """Release the underlying connection (no-op by default)."""
        pass


class BaseHttpRequest(ABC):
    """
    Single outgoing request, configured by the caller before sending.

    get_request_stream() and get_response() may block on network I/O; the
    notifier only calls them from its executor. Either may raise
    concurrent.futures.CancelledError to signal that the send was cancelled.
    """

    def __init__(self):
        self.content_type: Optional[str] = None
        self.accept: Optional[str] = None
        self.method: Optional[str] = None

    @abstractmethod
    def get_request_stream(self) -> BinaryIO:
        """
        Get a writable stream for the request body.

        The body is complete once the stream is closed.

        Returns:
            Writable binary stream (usable as a context manager)
        """
        pass

    @abstractmethod
    def get_response(self) -> BaseHttpResponse:
        """
        Send the request and wait for the response.

        Returns:
            Response object

        Raises:
            Exception: Transport errors, propagated unchanged
        """
        pass


class BaseHttpRequestHandler(ABC):
    """Source of configured requests (endpoint and credentials embedded)."""

    @abstractmethod
    def get(self) -> BaseHttpRequest:
        """
        Create a new request for one notice.

        Returns:
            Fresh, unsent request
        """
        pass
