"""
Notice Model
============
Value types describing one reported error event.

Notices are immutable: filters that want to change a notice return a new
one, typically via dataclasses.replace().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Severity(Enum):
    """Airbrake severity levels (serialized lowercase)."""
    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"


@dataclass(frozen=True)
class Frame:
    """Single backtrace frame."""
    file: str
    line: Optional[int]
    function: str


@dataclass(frozen=True)
class ErrorEntry:
    """One exception of the reported chain."""
    type: str
    message: str
    backtrace: List[Frame] = field(default_factory=list)


@dataclass(frozen=True)
class NotifierInfo:
    name: str
    version: str
    url: str


@dataclass(frozen=True)
class Context:
    """
    Notice context: where the error happened.

    Notifier and environment fields come from the config and the host;
    request fields are only set when an HTTP context was supplied.
    """
    notifier: Optional[NotifierInfo] = None
    environment: Optional[str] = None
    app_version: Optional[str] = None
    hostname: Optional[str] = None
    os: Optional[str] = None
    language: Optional[str] = None
    severity: Severity = Severity.ERROR
    url: Optional[str] = None
    component: Optional[str] = None
    action: Optional[str] = None
    user_agent: Optional[str] = None
    user_addr: Optional[str] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None


@dataclass(frozen=True)
class Notice:
    """
    Payload describing one reported error event.

    exception and http_context keep the originating objects for filters;
    they are never serialized.
    """
    errors: List[ErrorEntry] = field(default_factory=list)
    context: Context = field(default_factory=Context)
    environment: Dict[str, Any] = field(default_factory=dict)
    session: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    exception: Optional[BaseException] = field(default=None, compare=False, repr=False)
    http_context: Optional[Any] = field(default=None, compare=False, repr=False)
