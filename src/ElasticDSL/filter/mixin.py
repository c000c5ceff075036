"""Common envelope shared by every filter node."""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.node import Node
from ElasticDSL.core.util import FILTER


class FilterMixin(Node):
    """Base for filters: ``{discriminator: {...}}`` with name and cache options.

    ``name``, ``cache`` and ``cache_key`` are stored as ``_name``, ``_cache``
    and ``_cache_key`` next to the filter's own settings.
    """

    kind = FILTER

    def __init__(self, discriminator: str) -> None:
        super().__init__({discriminator: {}})
        self._discriminator = discriminator

    @property
    def _body(self) -> dict[str, Any]:
        return self._json[self._discriminator]

    def name(self, name: str | None = None) -> Any:
        """Set the name reported back in ``matched_filters``."""
        return self._accessor(self._body, "_name", name)

    def cache(self, cache: bool | None = None) -> Any:
        return self._accessor(self._body, "_cache", cache)

    def cache_key(self, key: str | None = None) -> Any:
        return self._accessor(self._body, "_cache_key", key)
