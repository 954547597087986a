"""
Airbrake Notifier
=================
Reports application exceptions to Airbrake without blocking the caller.
"""

import logging
import threading
from concurrent.futures import (
    CancelledError,
    Executor,
    Future,
    InvalidStateError,
    ThreadPoolExecutor,
)
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .filters import NoticeFilter, apply_filters, is_ignored_environment
from .response import AirbrakeResponse, RequestStatus
from ..config.constants import (
    HTTP_METHOD_POST,
    HTTP_STATUS_CREATED,
    JSON_CONTENT_TYPE,
    MAX_SEND_WORKERS,
    SEND_THREAD_NAME_PREFIX,
)
from ..config.settings import AirbrakeConfig
from ..loggers.base import BaseLogger
from ..loggers.file_logger import FileLogger
from ..notice.builder import NoticeBuilder
from ..notice.http_context import HttpContext
from ..notice.models import Notice, Severity
from ..transport.base import BaseHttpRequest, BaseHttpRequestHandler
from ..transport.requests_handler import HttpRequestHandler
from ..utils.environment import EnvironmentInfo

logger = logging.getLogger(__name__)


class AirbrakeNotifier:
    """
    Notifies Airbrake about errors in your application.

    Every notification goes through the same pipeline:
    1. Config check (project id and key are required)
    2. Environment suppression (ignore_environments)
    3. Notice construction
    4. Filter chain (a filter may transform or drop the notice)
    5. POST to Airbrake on the notifier's executor
    6. Response classification (201 is success, anything else a request error)

    Usage:
        notifier = AirbrakeNotifier(AirbrakeConfig(
            project_id="12345",
            project_key="abcdef",
            environment="production",
        ))

        notifier.add_filter(lambda notice: None if is_noise(notice) else notice)

        # Fire and forget; the outcome goes to the logger, if any
        notifier.notify(exception)

        # Or wait for the response
        response = notifier.notify_async(exception).result(timeout=10)
    """

    def __init__(
        self,
        config: AirbrakeConfig,
        logger: Optional[BaseLogger] = None,
        http_request_handler: Optional[BaseHttpRequestHandler] = None,
        environment_info: Optional[EnvironmentInfo] = None,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize notifier.

        Args:
            config: Notifier configuration
            logger: Outcome sink for notify(); defaults to a FileLogger
                when config.log_file is set
            http_request_handler: Request source; defaults to the requests
                based HttpRequestHandler
            environment_info: Host information attached to notices;
                probed from the current host when omitted
            executor: Executor running the HTTP exchange; the notifier
                creates and owns a thread pool when omitted
        """
        if config is None:
            raise ValueError("config is required")

        self.config = config

        if logger is not None:
            self.logger = logger
        elif config.log_file:
            self.logger = FileLogger(config.log_file)
        else:
            self.logger = None

        self.http_request_handler = http_request_handler or HttpRequestHandler(config)
        self.environment_info = environment_info or EnvironmentInfo.detect()

        self._filters: List[NoticeFilter] = []
        self._filters_lock = threading.Lock()

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=MAX_SEND_WORKERS,
            thread_name_prefix=SEND_THREAD_NAME_PREFIX,
        )

        logging.getLogger(__name__).debug("Airbrake notifier configured: %s", config.masked())

    def __enter__(self) -> "AirbrakeNotifier":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def add_filter(self, notice_filter: NoticeFilter) -> None:
        """
        Add a filter applied to every subsequent notice.

        Args:
            notice_filter: Callable returning the notice to send, or None
                to suppress it
        """
        with self._filters_lock:
            self._filters.append(notice_filter)

    def notify(
        self,
        exception: BaseException,
        context: Optional[HttpContext] = None,
        severity: Severity = Severity.ERROR,
    ) -> Future:
        """
        Notify Airbrake without waiting for the result.

        The outcome is passed to the configured logger once the call
        completes. Never raises; failures only reach the logger.

        Args:
            exception: Exception to report
            context: Optional request context
            severity: Notice severity

        Returns:
            Future of the AirbrakeResponse (may be ignored)
        """
        future = self.notify_async(exception, context, severity)
        if self.logger is not None:
            future.add_done_callback(self._log_outcome)
        return future

    def notify_async(
        self,
        exception: BaseException,
        context: Optional[HttpContext] = None,
        severity: Severity = Severity.ERROR,
    ) -> Future:
        """
        Notify Airbrake, returning a future of the response.

        Failures are delivered through the future: a missing project id or
        key fails it before any request is created, transport errors fail it
        with the original exception, and a cancelled transfer cancels it.

        Args:
            exception: Exception to report
            context: Optional request context
            severity: Notice severity

        Returns:
            Future resolving to an AirbrakeResponse
        """
        future: Future = Future()

        try:
            self.config.validate()

            if is_ignored_environment(self.config.environment, self.config.ignore_environments):
                logger.debug("Environment '%s' is ignored, notice not sent", self.config.environment)
                future.set_result(AirbrakeResponse.ignored())
                return future

            notice = self.build_notice(exception, context, severity)

            filters = self._snapshot_filters()
            if filters:
                notice = apply_filters(notice, filters)

            if notice is None:
                logger.debug("Notice suppressed by filter")
                future.set_result(AirbrakeResponse.ignored())
                return future

            request = self.http_request_handler.get()
            request.content_type = JSON_CONTENT_TYPE
            request.accept = JSON_CONTENT_TYPE
            request.method = HTTP_METHOD_POST

            body = NoticeBuilder.to_json_string(notice).encode('utf-8')
            self._executor.submit(self._send, request, body, future)

        except Exception as e:
            future.set_exception(e)

        return future

    def build_notice(
        self,
        exception: BaseException,
        context: Optional[HttpContext] = None,
        severity: Severity = Severity.ERROR,
    ) -> Notice:
        """Build the notice for an exception, before filters are applied."""
        builder = NoticeBuilder()
        builder.set_error_entries(exception)
        builder.set_configuration_context(self.config)
        builder.set_severity(severity)

        if context is not None:
            builder.set_http_context(context, self.config)

        info = self.environment_info
        builder.set_environment_context(info.hostname, info.os_description, info.platform_tag)

        return builder.to_notice()

    def close(self, wait: bool = True) -> None:
        """
        Shut down the notifier's own executor.

        An executor passed to the constructor is left to its owner.

        Args:
            wait: Wait for notices in flight
        """
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def _snapshot_filters(self) -> List[NoticeFilter]:
        with self._filters_lock:
            return list(self._filters)

    def _send(self, request: BaseHttpRequest, body: bytes, future: Future) -> None:
        # Only this method moves the future out of PENDING, so each
        # set_running_or_notify_cancel() below runs at most once per future
        if future.cancelled():
            future.set_running_or_notify_cancel()
            return

        try:
            response = self._exchange(request, body)
        except CancelledError:
            logger.info("Airbrake notification cancelled")
            future.cancel()
            future.set_running_or_notify_cancel()
            return
        except Exception as e:
            logger.info("Airbrake notification failed: %s", e)
            _resolve(future, exception=e)
            return

        logger.info(
            "Airbrake notification completed: status=%s, id=%s",
            response.status.value,
            response.id,
        )
        _resolve(future, result=response)

    def _exchange(self, request: BaseHttpRequest, body: bytes) -> AirbrakeResponse:
        with request.get_request_stream() as stream:
            stream.write(body)

        http_response = request.get_response()

        with _released(http_response):
            if http_response.status_code == HTTP_STATUS_CREATED:
                status = RequestStatus.SUCCESS
            else:
                status = RequestStatus.REQUEST_ERROR

            with http_response.get_response_stream() as stream:
                data = stream.read()

            return AirbrakeResponse.from_body(data, status)

    def _log_outcome(self, future: Future) -> None:
        if future.cancelled():
            logger.info("Airbrake notification cancelled, nothing to log")
            return

        try:
            error = future.exception()
            if error is not None:
                self.logger.log_exception(error)
            else:
                self.logger.log_response(future.result())
        except Exception as e:
            logger.warning("Failed to log Airbrake notification outcome: %s", e)


@contextmanager
def _released(response: Any):
    # Responses may be None or lack close()
    try:
        yield response
    finally:
        close = getattr(response, 'close', None)
        if callable(close):
            close()


def _resolve(
    future: Future,
    result: Optional[AirbrakeResponse] = None,
    exception: Optional[BaseException] = None,
) -> None:
    try:
        if exception is not None:
            future.set_exception(exception)
        else:
            future.set_result(result)
    except InvalidStateError:
        # Cancelled by the caller while the request was in flight
        logger.debug("Notification future already cancelled, outcome dropped")
        future.set_running_or_notify_cancel()


def create_notifier_from_settings(
    settings: Dict[str, Any],
    **kwargs,
) -> AirbrakeNotifier:
    """
    Factory function to create AirbrakeNotifier from a settings mapping.

    Args:
        settings: Settings dictionary (see AirbrakeConfig.load)
        **kwargs: Passed to AirbrakeNotifier (logger, http_request_handler, ...)

    Returns:
        Configured AirbrakeNotifier instance
    """
    return AirbrakeNotifier(AirbrakeConfig.load(settings), **kwargs)
