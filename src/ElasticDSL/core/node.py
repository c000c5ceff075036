"""Base class shared by every builder node.

A node owns exactly one JSON fragment. Category mixins create the envelope
(``{"term": {}}``, ``{"my_agg": {}}``, ...) in their constructor and leaf
classes keep mutating that same object through their own accessors, so the
fragment returned by ``to_json()`` always reflects every call made on the node.

Accessor convention
- ``node.m()`` and ``node.m(None)`` read the stored value (``None`` if unset).
- ``node.m(value)`` stores the value and returns the node for chaining.
- ``None`` never clears a field.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Collection, MutableMapping
from typing import Any, ClassVar

from ElasticDSL.core.errors import ArgumentTypeError
from ElasticDSL.core.util import ensure, is_sequence, snapshot
from ElasticDSL.utils.log import log


class Node:
    """One fragment of a request document."""

    kind: ClassVar[str] = ""

    def __init__(self, fragment: Any) -> None:
        self._json = fragment

    def _type(self) -> str:
        """Return the category tag used by the discriminator predicates."""
        return self.kind

    def to_json(self) -> Any:
        """Return the node's own fragment (not a copy)."""
        return self._json

    def get(self) -> Any:
        """Alias of ``to_json``."""
        return self.to_json()

    def to_string(self) -> str:
        """Serialize the fragment as compact JSON text."""
        return json.dumps(self.to_json(), separators=(",", ":"))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()})"

    def _accessor(self, target: MutableMapping[str, Any], key: str, value: Any) -> Any:
        if value is None:
            return target.get(key)
        target[key] = value
        return self

    def _enum_accessor(
        self,
        target: MutableMapping[str, Any],
        key: str,
        value: Any,
        allowed: Collection[str],
        *,
        upper: bool = False,
    ) -> Any:
        """Store ``value`` only if it belongs to ``allowed``.

        Matching is case-insensitive; the stored form is lowercase, or uppercase
        when ``upper`` is set. An unknown value leaves the previous state intact.

        Raises:
            ArgumentTypeError: If ``value`` is not a string.
        """
        if value is None:
            return target.get(key)
        if not isinstance(value, str):
            raise ArgumentTypeError(f"{key} must be a string")
        normalized = value.upper() if upper else value.lower()
        if normalized in allowed:
            target[key] = normalized
        else:
            log.debug("Ignoring unsupported %s value for %s: %r", key, type(self).__name__, value)
        return self

    def _node_accessor(
        self,
        target: MutableMapping[str, Any],
        key: str,
        value: Any,
        predicate: Callable[[object], bool],
        expected: str,
    ) -> Any:
        """Store a snapshot of a child node after checking its category."""
        if value is None:
            return target.get(key)
        ensure(predicate, value, expected)
        target[key] = snapshot(value)
        return self

    def _nodes_accessor(
        self,
        target: MutableMapping[str, Any],
        key: str,
        value: Any,
        predicate: Callable[[object], bool],
        expected: str,
    ) -> Any:
        """Append one child, or replace the whole slot with a list of children.

        The list form is validated in full before anything is written, so a
        rejected list leaves the slot exactly as it was.
        """
        if value is None:
            return target.get(key)
        if is_sequence(value):
            for item in value:
                if not predicate(item):
                    raise ArgumentTypeError(f"Every list element must be {expected}")
            target[key] = [snapshot(item) for item in value]
            return self
        ensure(predicate, value, f"{expected} or a list of them")
        target.setdefault(key, []).append(snapshot(value))
        return self
