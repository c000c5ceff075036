"""Search clients and the process-wide default client."""

from ElasticDSL.clients.base import SearchClient
from ElasticDSL.clients.http_client import HttpClient
from ElasticDSL.clients.registry import clear_client, current_client, register_client

__all__ = [
    "HttpClient",
    "SearchClient",
    "clear_client",
    "current_client",
    "register_client",
]
