"""Client capability used by ``Request.do_search``."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol

SuccessCallback = Callable[[Any], Any]
ErrorCallback = Callable[[Exception], Any]


class SearchClient(Protocol):
    """Protocol for a transport that talks to a search server.

    Paths are relative to the server's base URL. GET/POST/PUT/DELETE hand the
    decoded JSON body to ``on_success``; HEAD hands over the response headers.
    Transport failures go to ``on_error`` when it is given.
    """

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        """Issue a GET request with ``params`` as the query string."""
        raise NotImplementedError

    def post(
        self,
        path: str,
        body: Any = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        """Issue a POST request with a JSON body."""
        raise NotImplementedError

    def put(
        self,
        path: str,
        body: Any = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        """Issue a PUT request with a JSON body."""
        raise NotImplementedError

    def delete(
        self,
        path: str,
        body: Any = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        """Issue a DELETE request."""
        raise NotImplementedError

    def head(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Any:
        """Issue a HEAD request."""
        raise NotImplementedError
