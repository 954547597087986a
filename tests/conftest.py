"""
Pytest Configuration and Fixtures
==================================
Loads test settings from environment and provides reusable fixtures,
including in-memory HTTP transports that record every request.
"""

import io
import os
import sys
import pytest
from pathlib import Path
from dotenv import load_dotenv

# Add lib to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "lib"))

# Load test environment variables
env_file = project_root / ".env.test"
if env_file.exists():
    load_dotenv(env_file)
else:
    # Try loading from CI environment
    load_dotenv()

from airbrake_client.transport import (  # noqa: E402
    BaseHttpRequest,
    BaseHttpRequestHandler,
    BaseHttpResponse,
)


# =============================================================================
# FAKE TRANSPORT
# =============================================================================

class FakeResponse(BaseHttpResponse):
    """Canned response that records whether it was closed."""

    def __init__(self, status_code=201, body=b'{"id": "42", "url": "https://airbrake.io/notices/42"}'):
        self._status_code = status_code
        self._body = body if isinstance(body, bytes) else body.encode('utf-8')
        self.closed = False

    @property
    def status_code(self):
        return self._status_code

    def get_response_stream(self):
        return io.BytesIO(self._body)

    def close(self):
        self.closed = True


class FakeRequest(BaseHttpRequest):
    """Request capturing the body; optional errors for each stage."""

    def __init__(self, response=None, stream_error=None, response_error=None):
        super().__init__()
        self.response = response or FakeResponse()
        self.stream_error = stream_error
        self.response_error = response_error
        self.body = b""

    def get_request_stream(self):
        if self.stream_error is not None:
            raise self.stream_error

        request = self

        class _Stream(io.BytesIO):
            def close(self):
                if not self.closed:
                    request.body = self.getvalue()
                super().close()

        return _Stream()

    def get_response(self):
        if self.response_error is not None:
            raise self.response_error
        return self.response


class SpyRequestHandler(BaseHttpRequestHandler):
    """Handler handing out FakeRequests and recording each one."""

    def __init__(self, response=None, stream_error=None, response_error=None):
        self.response = response
        self.stream_error = stream_error
        self.response_error = response_error
        self.requests = []

    @property
    def call_count(self):
        return len(self.requests)

    def get(self):
        request = FakeRequest(
            response=self.response,
            stream_error=self.stream_error,
            response_error=self.response_error,
        )
        self.requests.append(request)
        return request


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def config():
    """Valid config for a non-ignored environment."""
    from airbrake_client import AirbrakeConfig

    return AirbrakeConfig(
        project_id="1",
        project_key="k",
        environment="prod",
        ignore_environments={"test"},
    )


@pytest.fixture
def environment_info():
    """Fixed host information (no probing of the test machine)."""
    from airbrake_client import EnvironmentInfo

    return EnvironmentInfo(
        hostname="test-host",
        os_description="Linux-6.1-x86_64",
        platform_tag="Python/3.12.0 (CPython)",
    )


@pytest.fixture
def spy_handler():
    """Spy handler returning 201 with id 42."""
    return SpyRequestHandler()


@pytest.fixture
def handler_factory():
    """Factory for spy handlers with custom responses or stage errors."""
    return SpyRequestHandler


@pytest.fixture
def response_factory():
    """Factory for canned responses."""
    return FakeResponse


@pytest.fixture
def make_notifier(environment_info):
    """Build notifiers that are shut down after the test."""
    from airbrake_client import AirbrakeNotifier

    created = []

    def _make_notifier(config, **kwargs):
        kwargs.setdefault('environment_info', environment_info)
        notifier = AirbrakeNotifier(config, **kwargs)
        created.append(notifier)
        return notifier

    yield _make_notifier

    for notifier in created:
        notifier.close()


@pytest.fixture(scope="session")
def airbrake_credentials():
    """Airbrake project credentials from environment."""
    creds = {
        "project_id": os.getenv("TEST_AIRBRAKE_PROJECT_ID"),
        "project_key": os.getenv("TEST_AIRBRAKE_PROJECT_KEY"),
    }

    if not all(creds.values()):
        pytest.skip("Airbrake credentials not configured")

    host = os.getenv("TEST_AIRBRAKE_HOST")
    if host:
        creds["host"] = host

    return creds


# =============================================================================
# UTILITY FIXTURES
# =============================================================================

@pytest.fixture
def raised_exception():
    """A real exception with a traceback and an explicit cause."""
    def _inner():
        raise KeyError("missing")

    try:
        try:
            _inner()
        except KeyError as e:
            raise RuntimeError("boom") from e
    except RuntimeError as e:
        return e


@pytest.fixture
def mock_env(monkeypatch):
    """Helper to mock environment variables."""
    def _mock_env(env_dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)
    return _mock_env


# =============================================================================
# TEST MARKERS COLLECTION
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: Tests that call the Airbrake API")
