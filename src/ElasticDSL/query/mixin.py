"""Common envelope shared by every query node."""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.node import Node
from ElasticDSL.core.util import QUERY


class QueryMixin(Node):
    """Base for queries: ``{discriminator: {...}}`` with a ``boost`` field.

    Not meant to be instantiated directly.
    """

    kind = QUERY

    def __init__(self, discriminator: str) -> None:
        super().__init__({discriminator: {}})
        self._discriminator = discriminator

    @property
    def _body(self) -> dict[str, Any]:
        return self._json[self._discriminator]

    def boost(self, boost: float | None = None) -> Any:
        """Set the boost applied to documents matching this query."""
        return self._accessor(self._body, "boost", boost)
