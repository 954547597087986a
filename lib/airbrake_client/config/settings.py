"""
Notifier Settings
=================
Immutable Airbrake configuration and the loaders that build it.

Settings can come from a plain mapping (application config files) or from
environment variables, optionally seeded from a .env file:

    AIRBRAKE_PROJECT_ID=12345
    AIRBRAKE_PROJECT_KEY=abcdef0123456789
    AIRBRAKE_ENVIRONMENT=production
    AIRBRAKE_IGNORE_ENVIRONMENTS=development,test
"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union

from dotenv import load_dotenv

from .constants import (
    DEFAULT_HOST,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_VARIABLES,
    LIST_FIELDS,
    SENSITIVE_FIELDS,
)


class ConfigurationError(ValueError):
    """Raised when the notifier configuration cannot be used for sending."""


@dataclass(frozen=True)
class AirbrakeConfig:
    """
    Airbrake notifier configuration.

    Only project_id and project_key are required, and only at send time:
    a config without them can still be created and inspected.
    """
    project_id: Optional[str] = None
    project_key: Optional[str] = None
    host: str = DEFAULT_HOST
    environment: Optional[str] = None
    app_version: Optional[str] = None
    ignore_environments: FrozenSet[str] = field(default_factory=frozenset)
    log_file: Optional[str] = None
    whitelist_keys: FrozenSet[str] = field(default_factory=frozenset)
    blacklist_keys: FrozenSet[str] = field(default_factory=frozenset)
    proxy_uri: Optional[str] = None
    proxy_username: Optional[str] = None
    proxy_password: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        # Accept any iterable of names, store frozensets
        for name in LIST_FIELDS:
            object.__setattr__(self, name, _to_name_set(getattr(self, name)))
        if not self.host:
            object.__setattr__(self, 'host', DEFAULT_HOST)

    def validate(self) -> None:
        """
        Check the fields required for sending notices.

        Raises:
            ConfigurationError: If project id or project key is empty
        """
        if not self.project_id:
            raise ConfigurationError("Project Id is required")
        if not self.project_key:
            raise ConfigurationError("Project Key is required")

    def masked(self) -> Dict[str, Any]:
        """
        Create a masked dictionary view of the config for safe logging.

        Returns:
            Dictionary with sensitive values masked
        """
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        for name in SENSITIVE_FIELDS:
            if data.get(name):
                data[name] = mask_value(data[name])
        for name in LIST_FIELDS:
            data[name] = sorted(data[name])
        return data

    @classmethod
    def load(cls, settings: Mapping[str, Any]) -> "AirbrakeConfig":
        """
        Create config from a settings mapping.

        Keys are the field names (project_id, project_key, ...). Unknown keys
        are ignored. List fields accept a sequence or a comma-separated string.

        Args:
            settings: Settings dictionary

        Returns:
            AirbrakeConfig instance

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        if settings is None:
            raise ConfigurationError("settings are required")

        known = {f.name for f in fields(cls)}
        values = {}

        for key, value in settings.items():
            if key not in known or value is None:
                continue
            if key == 'timeout':
                value = _parse_timeout(value)
            elif key not in LIST_FIELDS and not isinstance(value, str):
                value = str(value)
            values[key] = value

        return cls(**values)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "AirbrakeConfig":
        """
        Create config from AIRBRAKE_* environment variables.

        Args:
            env_file: Optional .env file loaded first (existing variables win)

        Returns:
            AirbrakeConfig instance
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        settings = {}
        for name, env_var in ENV_VARIABLES.items():
            value = os.getenv(env_var)
            if value:
                settings[name] = value

        return cls.load(settings)


def mask_value(value: str) -> str:
    """Mask a secret, keeping a short prefix and suffix of long values."""
    if isinstance(value, str) and len(value) > 8:
        return f"{value[:4]}...{value[-4:]}"
    return "***"


def _to_name_set(value: Union[str, Iterable[Any], None]) -> FrozenSet[str]:
    # Only comma-separated strings are trimmed; iterable members are kept as given
    if not value:
        return frozenset()
    if isinstance(value, str):
        return frozenset(item.strip() for item in value.split(',') if item.strip())

    try:
        items = iter(value)
    except TypeError:
        raise ConfigurationError(f"Expected a list of names, got {value!r}")

    return frozenset(item if isinstance(item, str) else str(item) for item in items if item is not None)


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid timeout value: {value!r}")

    if timeout <= 0:
        raise ConfigurationError(f"Timeout must be positive, got {timeout}")
    return timeout
