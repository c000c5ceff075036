"""Process-wide default client used when ``do_search`` gets no ``client=``."""

from __future__ import annotations

import threading

from ElasticDSL.clients.base import SearchClient
from ElasticDSL.utils.log import log

_lock = threading.Lock()
_client: SearchClient | None = None


def register_client(client: SearchClient) -> SearchClient:
    """Install ``client`` as the default client and return it."""
    global _client
    with _lock:
        _client = client
    log.debug("Registered search client %s", type(client).__name__)
    return client


def current_client() -> SearchClient | None:
    """Return the registered client, or None."""
    with _lock:
        return _client


def clear_client() -> SearchClient | None:
    """Unregister the default client and return the previous one."""
    global _client
    with _lock:
        previous, _client = _client, None
    return previous
