"""
Notifications module - Airbrake notifier, filters and responses.
"""

from .response import AirbrakeResponse, RequestStatus
from .filters import NoticeFilter, apply_filters, is_ignored_environment
from .notifier import AirbrakeNotifier, create_notifier_from_settings

__all__ = [
    "AirbrakeNotifier",
    "create_notifier_from_settings",
    "AirbrakeResponse",
    "RequestStatus",
    "NoticeFilter",
    "apply_filters",
    "is_ignored_environment",
]
