"""
Notice Builder
==============
Builds Airbrake v3 notices from exceptions and serializes them to JSON.

Usage:
    builder = NoticeBuilder()
    builder.set_error_entries(exception)
    builder.set_configuration_context(config)
    builder.set_severity(Severity.ERROR)
    builder.set_http_context(http_context, config)  # optional
    builder.set_environment_context(hostname, os_description, "Python/3.12")

    notice = builder.to_notice()
    body = NoticeBuilder.to_json_string(notice)
"""

import json
import traceback
from dataclasses import asdict, replace
from typing import Any, Dict, List, Mapping, Optional

from ..config.constants import (
    FILTERED_VALUE,
    NOTIFIER_NAME,
    NOTIFIER_URL,
    NOTIFIER_VERSION,
)
from ..config.settings import AirbrakeConfig
from .http_context import HttpContext
from .models import Context, ErrorEntry, Frame, Notice, NotifierInfo, Severity

# Context attributes whose wire name differs from the attribute name
_CONTEXT_WIRE_NAMES = {
    'app_version': 'version',
    'user_agent': 'userAgent',
    'user_addr': 'userAddr',
}

_USER_FIELDS = {
    'user_id': 'id',
    'user_name': 'name',
    'user_email': 'email',
}


class NoticeBuilder:
    """Step-by-step construction of a Notice."""

    def __init__(self):
        self._errors: List[ErrorEntry] = []
        self._context = Context(
            notifier=NotifierInfo(NOTIFIER_NAME, NOTIFIER_VERSION, NOTIFIER_URL),
        )
        self._environment: Dict[str, Any] = {}
        self._session: Dict[str, Any] = {}
        self._params: Dict[str, Any] = {}
        self._exception: Optional[BaseException] = None
        self._http_context: Optional[HttpContext] = None

    def set_error_entries(self, exception: Optional[BaseException]) -> None:
        """
        Set error entries from an exception and its chained causes.

        The reported exception comes first, followed by its explicit cause
        (raise ... from) or, failing that, the exception it was raised while
        handling.

        Args:
            exception: Exception to report
        """
        self._exception = exception
        self._errors = []

        seen = set()
        current = exception
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            self._errors.append(ErrorEntry(
                type=type(current).__name__,
                message=str(current),
                backtrace=_backtrace(current),
            ))
            if current.__cause__ is not None:
                current = current.__cause__
            elif not current.__suppress_context__:
                current = current.__context__
            else:
                current = None

    def set_configuration_context(self, config: AirbrakeConfig) -> None:
        self._context = replace(
            self._context,
            environment=config.environment,
            app_version=config.app_version,
        )

    def set_severity(self, severity: Severity) -> None:
        self._context = replace(self._context, severity=severity)

    def set_http_context(self, context: HttpContext, config: AirbrakeConfig) -> None:
        """
        Set request fields, filtering params, session and environment vars.

        Args:
            context: Request description
            config: Config holding whitelist/blacklist keys
        """
        if context is None:
            return

        self._http_context = context
        self._context = replace(
            self._context,
            url=context.url,
            component=context.component,
            action=context.action,
            user_agent=context.user_agent,
            user_addr=context.user_addr,
            user_id=context.user_id,
            user_name=context.user_name,
            user_email=context.user_email,
        )

        self._params = filter_values(context.parameters, config)
        self._session = filter_values(context.session, config)
        self._environment = filter_values(context.environment_vars, config)

    def set_environment_context(
        self,
        hostname: Optional[str],
        os_description: Optional[str],
        platform_tag: Optional[str],
    ) -> None:
        self._context = replace(
            self._context,
            hostname=hostname,
            os=os_description,
            language=platform_tag,
        )

    def to_notice(self) -> Notice:
        return Notice(
            errors=list(self._errors),
            context=self._context,
            environment=dict(self._environment),
            session=dict(self._session),
            params=dict(self._params),
            exception=self._exception,
            http_context=self._http_context,
        )

    @staticmethod
    def to_json_string(notice: Notice) -> str:
        """
        Serialize notice to the Airbrake v3 JSON body.

        Args:
            notice: Notice to serialize

        Returns:
            JSON string
        """
        payload = {
            'errors': [asdict(error) for error in notice.errors],
            'context': _context_to_dict(notice.context),
        }

        for key in ('environment', 'session', 'params'):
            value = getattr(notice, key)
            if value:
                payload[key] = value

        return json.dumps(payload, default=str)


def filter_values(
    values: Optional[Mapping[str, Any]],
    config: AirbrakeConfig,
) -> Dict[str, Any]:
    """
    Replace values of blacklisted (or, with a whitelist, non-whitelisted) keys.

    Args:
        values: Mapping to filter
        config: Config holding whitelist/blacklist keys

    Returns:
        Filtered copy of values
    """
    if not values:
        return {}

    filtered = {}
    for key, value in values.items():
        if key in config.blacklist_keys:
            filtered[key] = FILTERED_VALUE
        elif config.whitelist_keys and key not in config.whitelist_keys:
            filtered[key] = FILTERED_VALUE
        else:
            filtered[key] = value
    return filtered


def _backtrace(exception: BaseException) -> List[Frame]:
    # Airbrake expects the innermost frame first
    frames = traceback.extract_tb(exception.__traceback__)
    return [
        Frame(file=frame.filename, line=frame.lineno, function=frame.name)
        for frame in reversed(frames)
    ]


def _context_to_dict(context: Context) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    user: Dict[str, Any] = {}

    for key, value in asdict(context).items():
        if value is None:
            continue
        if key in _USER_FIELDS:
            user[_USER_FIELDS[key]] = value
        elif key == 'severity':
            data['severity'] = context.severity.value
        else:
            data[_CONTEXT_WIRE_NAMES.get(key, key)] = value

    if user:
        data['user'] = user
    return data
