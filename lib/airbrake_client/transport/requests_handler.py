"""
Requests HTTP Transport
=======================
Default request handler sending notices with the requests library.

Features:
- Notices URL built once from the config (project id and key embedded)
- One fresh request object per notice
- Optional HTTP(S) proxy with credentials
"""

import io
from typing import Dict, Optional
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from .base import BaseHttpRequest, BaseHttpRequestHandler, BaseHttpResponse
from ..config.constants import NOTICES_PATH_TEMPLATE
from ..config.settings import AirbrakeConfig


class RequestsHttpResponse(BaseHttpResponse):
    """Wraps a requests.Response."""

    def __init__(self, response: requests.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    def get_response_stream(self) -> io.BytesIO:
        return io.BytesIO(self._response.content)

    def close(self) -> None:
        self._response.close()


class _BodyStream(io.BytesIO):
    """Buffer that hands its content to the request when closed."""

    def __init__(self, request: "RequestsHttpRequest"):
        super().__init__()
        self._request = request

    def close(self) -> None:
        if not self.closed:
            self._request.body = self.getvalue()
        super().close()


class RequestsHttpRequest(BaseHttpRequest):
    """
    Request sent with requests.request().

    The body written to the request stream is buffered and sent
    in get_response().
    """

    def __init__(
        self,
        url: str,
        timeout: float,
        proxies: Optional[Dict[str, str]] = None,
    ):
        super().__init__()
        self.url = url
        self.timeout = timeout
        self.proxies = proxies
        self.body: bytes = b""

    def get_request_stream(self) -> io.BytesIO:
        return _BodyStream(self)

    def get_response(self) -> RequestsHttpResponse:
        headers = {}
        if self.content_type:
            headers['Content-Type'] = self.content_type
        if self.accept:
            headers['Accept'] = self.accept

        response = requests.request(
            self.method or "POST",
            self.url,
            data=self.body,
            headers=headers,
            timeout=self.timeout,
            proxies=self.proxies,
        )
        return RequestsHttpResponse(response)


class HttpRequestHandler(BaseHttpRequestHandler):
    """
    Request handler for the Airbrake notices endpoint.

    Usage:
        handler = HttpRequestHandler(config)
        request = handler.get()
    """

    def __init__(self, config: AirbrakeConfig):
        """
        Initialize handler.

        Args:
            config: Notifier config (project id/key, host, proxy, timeout)
        """
        self.url = build_notices_url(config.host, config.project_id, config.project_key)
        self.timeout = config.timeout
        self.proxies = build_proxies(
            config.proxy_uri,
            config.proxy_username,
            config.proxy_password,
        )

    def get(self) -> RequestsHttpRequest:
        return RequestsHttpRequest(self.url, self.timeout, self.proxies)


def build_notices_url(host: str, project_id: Optional[str], project_key: Optional[str]) -> str:
    """
    Build the notices endpoint URL.

    Args:
        host: Airbrake host (e.g. https://api.airbrake.io)
        project_id: Project identifier
        project_key: Project API key

    Returns:
        Full URL with the key as query parameter
    """
    path = NOTICES_PATH_TEMPLATE.format(project_id=quote(project_id or "", safe=""))
    return f"{host.rstrip('/')}{path}?key={quote(project_key or '', safe='')}"


def build_proxies(
    proxy_uri: Optional[str],
    username: Optional[str] = None,
    password: Optional[str] = None,
) -> Optional[Dict[str, str]]:
    """
    Build a requests proxies mapping.

    Args:
        proxy_uri: Proxy URL, e.g. http://proxy.local:3128
        username: Optional proxy user
        password: Optional proxy password

    Returns:
        Proxies dict for both schemes, or None without a proxy
    """
    if not proxy_uri:
        return None

    if username:
        parts = urlsplit(proxy_uri)
        credentials = quote(username, safe="")
        if password:
            credentials = f"{credentials}:{quote(password, safe='')}"
        netloc = f"{credentials}@{parts.netloc}"
        proxy_uri = urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))

    return {'http': proxy_uri, 'https': proxy_uri}
