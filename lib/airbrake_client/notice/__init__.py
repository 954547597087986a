"""
Airbrake Client - Notices
=========================
Notice model, request context and the builder producing the wire payload.
"""

from .models import Severity, Frame, ErrorEntry, NotifierInfo, Context, Notice
from .http_context import HttpContext
from .builder import NoticeBuilder, filter_values

__all__ = [
    "Severity",
    "Frame",
    "ErrorEntry",
    "NotifierInfo",
    "Context",
    "Notice",
    "HttpContext",
    "NoticeBuilder",
    "filter_values",
]
