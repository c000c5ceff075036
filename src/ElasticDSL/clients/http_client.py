"""HTTP search client built on ``requests``."""

from __future__ import annotations

import json
import random
import time
from typing import Any, Mapping
from urllib.parse import urlsplit

import requests

from ElasticDSL.clients.base import ErrorCallback, SuccessCallback
from ElasticDSL.utils.log import log

DEFAULT_SERVER_URL = "http://localhost:9200"
DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 3
BASE_PAUSE = 0.5
MAX_SLEEP = 8.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "elastic-dsl/0.1",
    "Accept": "application/json",
}
JSON_HEADERS = {**HEADERS, "Content-Type": "application/json"}


def normalize_server_url(server_url: str, port: int | None = None) -> str:
    """Build the base URL from a URL, or from a host and optional port.

    A bare host without a port is addressed on port 80; ``host:port`` keeps
    its port. A trailing slash is removed so request paths can always be
    appended with a leading ``/``.
    """
    if port is not None and port > 0:
        url = f"http://{server_url}:{port}"
    elif "://" not in server_url:
        url = f"http://{server_url.rstrip('/')}"
        if urlsplit(url).port is None:
            url += ":80"
    else:
        url = server_url
    return url.rstrip("/")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class HttpClient:
    """Search client speaking JSON over HTTP.

    Requests failing with a retryable status, a timeout or a connection error
    are retried with exponential backoff. The final failure goes to
    ``on_error``; without one it is logged and ``None`` is returned.
    """

    def __init__(
        self,
        server_url: str = DEFAULT_SERVER_URL,
        port: int | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = MAX_ATTEMPTS,
        auth: tuple[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            server_url: Base URL, or a host name when ``port`` is given.
            port: Port used together with a host name.
            timeout: Request timeout in seconds.
            max_attempts: Attempts per request, including the first one.
            auth: Optional ``(username, password)`` for basic auth.
            session: Session to use instead of a new one.
        """
        self._base_url = normalize_server_url(server_url, port)
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)
        self._session = session or requests.Session()
        if auth is not None:
            self._session.auth = auth

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def server_url(self, server_url: str | None = None, port: int | None = None) -> Any:
        """Get the base URL, or point the client at another server."""
        if server_url is None:
            return self._base_url
        self._base_url = normalize_server_url(server_url, port)
        return self

    def url(self, path: str) -> str:
        """Return the absolute URL of ``path`` on this server."""
        if not path.startswith("/"):
            path = "/" + path
        return self._base_url + path

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        return self._call("GET", path, on_success, on_error, params=params)

    def head(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        """Issue a HEAD request; ``on_success`` receives the response headers."""
        return self._call("HEAD", path, on_success, on_error, params=params)

    def post(
        self,
        path: str,
        body: Any = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        return self._call("POST", path, on_success, on_error, body=body)

    def put(
        self,
        path: str,
        body: Any = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        return self._call("PUT", path, on_success, on_error, body=body)

    def delete(
        self,
        path: str,
        body: Any = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        return self._call("DELETE", path, on_success, on_error, body=body)

    def _call(
        self,
        method: str,
        path: str,
        on_success: SuccessCallback | None,
        on_error: ErrorCallback | None,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request and route the outcome to the callbacks."""
        query = {str(key): _stringify(value) for key, value in (params or {}).items()}
        data = body if body is None or isinstance(body, (str, bytes)) else json.dumps(body)
        try:
            response = self._send_with_retry(method, self.url(path), params=query or None, data=data)
            result = response.headers if method == "HEAD" else self._decode(response)
        except (requests.RequestException, ValueError) as error:
            if on_error is not None:
                return on_error(error)
            log.error("%s %s failed: %s", method, path, error)
            return None
        if on_success is not None:
            return on_success(result)
        return result

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        return response.json()

    def _send_with_retry(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None,
        data: Any,
    ) -> requests.Response:
        """Issue a request with retries for transient failures."""
        headers = HEADERS if data is None else JSON_HEADERS
        last_error: Exception | None = None
        for attempt in range(1, self._max_attempts + 1):
            try:
                log.debug("%s %s attempt=%d/%d", method, urlsplit(url).path, attempt, self._max_attempts)
                response = self._session.request(
                    method,
                    url,
                    params=params,
                    data=data,
                    headers=headers,
                    timeout=self._timeout,
                )
                if response.status_code in RETRYABLE_STATUS:
                    raise requests.HTTPError(f"HTTP {response.status_code}", response=response)
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as error:
                last_error = error
                if attempt < self._max_attempts:
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                    log.warning(
                        "%s retry attempt=%d/%d delay=%.2fs error=%s",
                        method,
                        attempt,
                        self._max_attempts,
                        delay,
                        error,
                    )
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
