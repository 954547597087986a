"""
Configuration module - Notifier settings and constants.
"""

from .settings import (
    AirbrakeConfig,
    ConfigurationError,
    mask_value,
)

from .constants import (
    NOTIFIER_VERSION,
    NOTIFIER_NAME,
    DEFAULT_HOST,
    DEFAULT_TIMEOUT_SECONDS,
    JSON_CONTENT_TYPE,
    HTTP_STATUS_CREATED,
    FILTERED_VALUE,
)

__all__ = [
    # Settings
    "AirbrakeConfig",
    "ConfigurationError",
    "mask_value",
    # Constants
    "NOTIFIER_VERSION",
    "NOTIFIER_NAME",
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT_SECONDS",
    "JSON_CONTENT_TYPE",
    "HTTP_STATUS_CREATED",
    "FILTERED_VALUE",
]
