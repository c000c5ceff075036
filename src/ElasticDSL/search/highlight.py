"""Search result highlighting."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from ElasticDSL.core.errors import ArgumentTypeError
from ElasticDSL.core.node import Node
from ElasticDSL.core.util import HIGHLIGHT, as_str_list

_ORDERS = frozenset({"score"})
_TAGS_SCHEMAS = frozenset({"styled"})
_ENCODERS = frozenset({"default", "html"})
_TYPES = frozenset({"highlighter", "plain", "fast-vector-highlighter", "postings"})
_FRAGMENTERS = frozenset({"simple", "span"})


class Highlight(Node):
    """Highlight settings, global or per field.

    Every option takes an optional ``field``: without it the option applies to
    all highlighted fields, with it the option is stored on that field (which
    is added when missing).
    """

    kind = HIGHLIGHT

    def __init__(self, fields: Any = None) -> None:
        super().__init__({})
        if fields is not None:
            self.fields(fields)

    def _target(self, field: str | None) -> dict[str, Any]:
        if field is None:
            return self._json
        return self._json.setdefault("fields", {}).setdefault(field, {})

    def _lookup(self, key: str, field: str | None) -> Any:
        if field is None:
            return self._json.get(key)
        return self._json.get("fields", {}).get(field, {}).get(key)

    def _option(self, key: str, value: Any, field: str | None) -> Any:
        if value is None:
            return self._lookup(key, field)
        self._target(field)[key] = value
        return self

    def _enum_option(self, key: str, value: Any, field: str | None, allowed: Collection[str]) -> Any:
        if value is None:
            return self._lookup(key, field)
        if field is None:
            return self._enum_accessor(self._json, key, value, allowed)
        # A rejected value must not add the field entry.
        accepted: dict[str, Any] = {}
        self._enum_accessor(accepted, key, value, allowed)
        if key in accepted:
            self._target(field)[key] = accepted[key]
        return self

    def fields(self, fields: Any = None) -> Any:
        """Add fields to highlight; options of known fields are left alone."""
        if fields is None:
            return self._json.get("fields")
        target = self._json.setdefault("fields", {})
        for field in as_str_list(fields, "fields"):
            target.setdefault(field, {})
        return self

    def pre_tags(self, tags: Any = None, field: str | None = None) -> Any:
        if tags is None:
            return self._lookup("pre_tags", field)
        return self._option("pre_tags", as_str_list(tags, "pre_tags"), field)

    def post_tags(self, tags: Any = None, field: str | None = None) -> Any:
        if tags is None:
            return self._lookup("post_tags", field)
        return self._option("post_tags", as_str_list(tags, "post_tags"), field)

    def order(self, order: str | None = None, field: str | None = None) -> Any:
        return self._enum_option("order", order, field, _ORDERS)

    def tags_schema(self, schema: str | None = None) -> Any:
        return self._enum_accessor(self._json, "tags_schema", schema, _TAGS_SCHEMAS)

    def highlight_filter(self, enabled: bool | None = None, field: str | None = None) -> Any:
        return self._option("highlight_filter", enabled, field)

    def fragment_size(self, size: int | None = None, field: str | None = None) -> Any:
        return self._option("fragment_size", size, field)

    def number_of_fragments(self, count: int | None = None, field: str | None = None) -> Any:
        return self._option("number_of_fragments", count, field)

    def encoder(self, encoder: str | None = None) -> Any:
        return self._enum_accessor(self._json, "encoder", encoder, _ENCODERS)

    def require_field_match(self, required: bool | None = None, field: str | None = None) -> Any:
        return self._option("require_field_match", required, field)

    def boundary_max_scan(self, chars: int | None = None, field: str | None = None) -> Any:
        return self._option("boundary_max_scan", chars, field)

    def boundary_chars(self, chars: str | None = None, field: str | None = None) -> Any:
        return self._option("boundary_chars", chars, field)

    def type(self, highlighter: str | None = None, field: str | None = None) -> Any:
        """Highlighter implementation: highlighter, plain, fast-vector-highlighter or postings."""
        return self._enum_option("type", highlighter, field, _TYPES)

    def fragmenter(self, fragmenter: str | None = None, field: str | None = None) -> Any:
        return self._enum_option("fragmenter", fragmenter, field, _FRAGMENTERS)

    def options(self, options: Mapping[str, Any] | None = None, field: str | None = None) -> Any:
        """Extra highlighter specific settings.

        Raises:
            ArgumentTypeError: If ``options`` is not a plain mapping.
        """
        if options is None:
            return self._lookup("options", field)
        if not isinstance(options, Mapping):
            raise ArgumentTypeError("Argument must be an object")
        return self._option("options", dict(options), field)
