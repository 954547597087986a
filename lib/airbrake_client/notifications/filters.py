"""
Notice Filters
==============
Filter chain and environment suppression rules applied before sending.
"""

from typing import AbstractSet, Callable, Iterable, Optional

from ..notice.models import Notice

# A filter returns the (possibly transformed) notice, or None to drop it
NoticeFilter = Callable[[Notice], Optional[Notice]]


def apply_filters(notice: Notice, filters: Iterable[NoticeFilter]) -> Optional[Notice]:
    """
    Apply filters in order, stopping at the first one that drops the notice.

    Each filter receives the previous filter's output. Exceptions raised by
    a filter are not caught.

    Args:
        notice: Notice to filter
        filters: Filters in registration order

    Returns:
        Final notice, or None if a filter suppressed it
    """
    for notice_filter in filters:
        notice = notice_filter(notice)
        if notice is None:
            return None
    return notice


def is_ignored_environment(
    environment: Optional[str],
    ignore_environments: Optional[AbstractSet[str]],
) -> bool:
    """
    Check whether notices from an environment must be suppressed.

    Matching is exact, case-sensitive membership.

    Args:
        environment: Current environment name
        ignore_environments: Environment names to suppress

    Returns:
        True if the environment is in the ignore set
    """
    if not environment or not ignore_environments:
        return False
    return environment in ignore_environments
