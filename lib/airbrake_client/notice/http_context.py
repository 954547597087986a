"""
HTTP Context
============
Description of the web request during which an error occurred.

Frameworks fill an HttpContext and pass it to the notifier; plain WSGI
applications can use HttpContext.from_wsgi_environ().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qsl


@dataclass
class HttpContext:
    """Request data attached to a notice."""
    url: Optional[str] = None
    user_agent: Optional[str] = None
    user_addr: Optional[str] = None
    component: Optional[str] = None
    action: Optional[str] = None
    parameters: Dict[str, Any] = field(default_factory=dict)
    session: Dict[str, Any] = field(default_factory=dict)
    environment_vars: Dict[str, Any] = field(default_factory=dict)
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None

    @classmethod
    def from_wsgi_environ(
        cls,
        environ: Mapping[str, Any],
        **kwargs,
    ) -> "HttpContext":
        """
        Build context from a WSGI environ dictionary.

        Query string parameters become notice params and the CGI-style
        string entries of the environ become notice environment vars.

        Args:
            environ: WSGI environ
            **kwargs: Extra fields (component, action, session, user_id, ...)

        Returns:
            HttpContext instance
        """
        scheme = environ.get('wsgi.url_scheme', 'http')
        host = environ.get('HTTP_HOST') or environ.get('SERVER_NAME', '')
        path = environ.get('SCRIPT_NAME', '') + environ.get('PATH_INFO', '')
        query = environ.get('QUERY_STRING', '')

        url = f"{scheme}://{host}{path}"
        if query:
            url = f"{url}?{query}"

        env_vars = {
            key: value for key, value in environ.items()
            if isinstance(value, str) and not key.startswith('wsgi.')
        }

        return cls(
            url=url,
            user_agent=environ.get('HTTP_USER_AGENT'),
            user_addr=environ.get('REMOTE_ADDR'),
            parameters=dict(parse_qsl(query, keep_blank_values=True)),
            environment_vars=env_vars,
            **kwargs,
        )
