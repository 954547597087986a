"""
Utilities module - Host environment helpers.
"""

from .environment import (
    EnvironmentInfo,
    get_platform_tag,
)

__all__ = [
    "EnvironmentInfo",
    "get_platform_tag",
]
