"""Structural helpers shared by every builder node.

Discriminator predicates
- A value is a node when it exposes a callable ``_type()`` and a callable
  ``to_json()``. No class hierarchy is consulted, so any object honouring the
  two-method contract can be nested inside a builder.
- Category predicates additionally compare the ``_type()`` tag, which keeps a
  filter from being accepted where a query is required even though both have
  the same shape.

Combinator
- ``extend`` is the shallow merge used wherever named fragments (facets,
  aggregations, script fields, suggesters) are folded into one mapping.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from ElasticDSL.core.errors import ArgumentTypeError

QUERY = "query"
FILTER = "filter"
FACET = "facet"
AGGREGATION = "aggregation"
SORT = "sort"
HIGHLIGHT = "highlight"
SUGGEST = "suggest"
SCORE_FUNCTION = "score function"
GEO_POINT = "geo point"
SCRIPT_FIELD = "script field"
RESCORE = "rescore"
SHAPE = "shape"
INDEXED_SHAPE = "indexed shape"
REQUEST = "request"
GENERATOR = "generator"


def extend(target: MutableMapping[str, Any], *additions: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Copy every key of each addition onto ``target``.

    Later additions overwrite earlier keys of the same name.

    Args:
        target: Mapping that receives the keys.
        *additions: Mappings merged left to right.

    Returns:
        The same ``target`` object.
    """
    for addition in additions:
        for key, value in addition.items():
            target[key] = value
    return target


def is_node(obj: object) -> bool:
    """Return True if ``obj`` exposes the node contract (``_type`` + ``to_json``)."""
    if obj is None or isinstance(obj, type):
        return False
    return callable(getattr(obj, "_type", None)) and callable(getattr(obj, "to_json", None))


def _has_tag(obj: object, tag: str) -> bool:
    return is_node(obj) and obj._type() == tag  # type: ignore[attr-defined]


def is_query(obj: object) -> bool:
    return _has_tag(obj, QUERY)


def is_filter(obj: object) -> bool:
    return _has_tag(obj, FILTER)


def is_facet(obj: object) -> bool:
    return _has_tag(obj, FACET)


def is_aggregation(obj: object) -> bool:
    return _has_tag(obj, AGGREGATION)


def is_sort(obj: object) -> bool:
    return _has_tag(obj, SORT)


def is_highlight(obj: object) -> bool:
    return _has_tag(obj, HIGHLIGHT)


def is_suggest(obj: object) -> bool:
    return _has_tag(obj, SUGGEST)


def is_score_function(obj: object) -> bool:
    return _has_tag(obj, SCORE_FUNCTION)


def is_geo_point(obj: object) -> bool:
    return _has_tag(obj, GEO_POINT)


def is_script_field(obj: object) -> bool:
    return _has_tag(obj, SCRIPT_FIELD)


def is_rescore(obj: object) -> bool:
    return _has_tag(obj, RESCORE)


def is_shape(obj: object) -> bool:
    return _has_tag(obj, SHAPE)


def is_indexed_shape(obj: object) -> bool:
    return _has_tag(obj, INDEXED_SHAPE)


def is_generator(obj: object) -> bool:
    return _has_tag(obj, GENERATOR)


def is_span_query(obj: object) -> bool:
    """Return True for queries whose fragment is keyed ``span_*``."""
    if not is_query(obj):
        return False
    fragment = obj.to_json()  # type: ignore[attr-defined]
    return isinstance(fragment, Mapping) and any(str(key).startswith("span_") for key in fragment)


def ensure(predicate: Callable[[object], bool], value: object, expected: str) -> None:
    """Raise ``ArgumentTypeError`` unless ``predicate(value)`` holds.

    Args:
        predicate: Discriminator predicate.
        value: Candidate argument.
        expected: Human readable category used in the message, e.g. ``"a Query"``.

    Raises:
        ArgumentTypeError: If the predicate rejects the value.
    """
    if not predicate(value):
        raise ArgumentTypeError(f"Argument must be {expected}")


def snapshot(node: Any) -> Any:
    """Return a detached deep copy of ``node.to_json()``."""
    return copy.deepcopy(node.to_json())


def is_sequence(value: object) -> bool:
    """Return True for list/tuple arguments (the "replace all" call shape)."""
    return isinstance(value, (list, tuple))


def as_str_list(value: object, what: str) -> list[str]:
    """Normalize a string or a list of strings into a list.

    Args:
        value: A single string or a list/tuple of strings.
        what: Name used in error messages.

    Returns:
        A new list of strings.

    Raises:
        ArgumentTypeError: If the value is neither a string nor a list of strings.
    """
    if isinstance(value, str):
        return [value]
    if is_sequence(value) and all(isinstance(item, str) for item in value):  # type: ignore[union-attr]
        return list(value)  # type: ignore[arg-type]
    raise ArgumentTypeError(f"{what} must be a string or a list of strings")


def dedup_preserve_order(values: list[str]) -> list[str]:
    """Remove duplicates while preserving first occurrence order."""
    seen: set[str] = set()
    unique: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique.append(value)
    return unique


def rekey(mapping: MutableMapping[str, Any], old: str, new: str) -> None:
    """Move the value stored under ``old`` to ``new``."""
    if old == new:
        return
    mapping[new] = mapping.pop(old, {})
