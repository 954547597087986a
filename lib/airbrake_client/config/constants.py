"""
Airbrake Client - Constants and Configuration
=============================================
Shared constants, wire format values, and default settings
for the Airbrake notifier.
"""

from typing import Dict, Tuple

# Version identifier for the Airbrake client
NOTIFIER_VERSION = "1.0.0"
NOTIFIER_NAME = "airbrake-client-python"
NOTIFIER_URL = "https://github.com/airbrake/airbrake-client-python"

# =============================================================================
# ENDPOINT CONFIGURATION
# =============================================================================

# Default Airbrake host (overridable per config)
DEFAULT_HOST: str = "https://api.airbrake.io"

# Notice endpoint, relative to the host
NOTICES_PATH_TEMPLATE: str = "/api/v3/projects/{project_id}/notices"

# Request timeout for notice delivery (seconds)
DEFAULT_TIMEOUT_SECONDS: float = 10.0

# =============================================================================
# WIRE FORMAT
# =============================================================================

JSON_CONTENT_TYPE: str = "application/json"
HTTP_METHOD_POST: str = "POST"

# The only status code Airbrake uses to accept a notice
HTTP_STATUS_CREATED: int = 201

# Replacement value for blacklisted / non-whitelisted keys
FILTERED_VALUE: str = "[Filtered]"

# =============================================================================
# DISPATCH CONFIGURATION
# =============================================================================

# Worker threads for the notifier's own executor
MAX_SEND_WORKERS: int = 4
SEND_THREAD_NAME_PREFIX: str = "airbrake-notifier"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

# Maps AirbrakeConfig fields to environment variable names
ENV_VARIABLES: Dict[str, str] = {
    'project_id': 'AIRBRAKE_PROJECT_ID',
    'project_key': 'AIRBRAKE_PROJECT_KEY',
    'host': 'AIRBRAKE_HOST',
    'environment': 'AIRBRAKE_ENVIRONMENT',
    'app_version': 'AIRBRAKE_APP_VERSION',
    'ignore_environments': 'AIRBRAKE_IGNORE_ENVIRONMENTS',
    'log_file': 'AIRBRAKE_LOG_FILE',
    'whitelist_keys': 'AIRBRAKE_WHITELIST_KEYS',
    'blacklist_keys': 'AIRBRAKE_BLACKLIST_KEYS',
    'proxy_uri': 'AIRBRAKE_PROXY_URI',
    'proxy_username': 'AIRBRAKE_PROXY_USERNAME',
    'proxy_password': 'AIRBRAKE_PROXY_PASSWORD',
    'timeout': 'AIRBRAKE_TIMEOUT',
}

# Config fields holding a collection of names (comma-separated in text form)
LIST_FIELDS: Tuple[str, ...] = (
    'ignore_environments',
    'whitelist_keys',
    'blacklist_keys',
)

# Config fields never written to logs in clear text
SENSITIVE_FIELDS: Tuple[str, ...] = (
    'project_key',
    'proxy_password',
)
