"""
Airbrake Client
===============
Asynchronous Airbrake error notifier.

Usage:
    from airbrake_client import AirbrakeConfig, AirbrakeNotifier

    notifier = AirbrakeNotifier(AirbrakeConfig.from_env())

    try:
        do_work()
    except Exception as e:
        notifier.notify(e)
"""

from .config import (
    AirbrakeConfig,
    ConfigurationError,
    NOTIFIER_VERSION,
)

from .notice import (
    Severity,
    Notice,
    ErrorEntry,
    Frame,
    Context,
    HttpContext,
    NoticeBuilder,
)

from .notifications import (
    AirbrakeNotifier,
    create_notifier_from_settings,
    AirbrakeResponse,
    RequestStatus,
    apply_filters,
    is_ignored_environment,
)

from .transport import (
    BaseHttpRequestHandler,
    BaseHttpRequest,
    BaseHttpResponse,
    HttpRequestHandler,
)

from .loggers import BaseLogger, FileLogger

from .utils import EnvironmentInfo

__version__ = NOTIFIER_VERSION

__all__ = [
    # Config
    "AirbrakeConfig",
    "ConfigurationError",
    # Notices
    "Severity",
    "Notice",
    "ErrorEntry",
    "Frame",
    "Context",
    "HttpContext",
    "NoticeBuilder",
    # Notifications
    "AirbrakeNotifier",
    "create_notifier_from_settings",
    "AirbrakeResponse",
    "RequestStatus",
    "apply_filters",
    "is_ignored_environment",
    # Transport
    "BaseHttpRequestHandler",
    "BaseHttpRequest",
    "BaseHttpResponse",
    "HttpRequestHandler",
    # Loggers
    "BaseLogger",
    "FileLogger",
    # Utils
    "EnvironmentInfo",
]
