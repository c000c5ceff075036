"""Score functions used by ``FunctionScoreQuery``."""

from __future__ import annotations

from numbers import Number
from typing import Any

from ElasticDSL.core.errors import ArgumentTypeError
from ElasticDSL.core.node import Node
from ElasticDSL.core.util import SCORE_FUNCTION, is_filter, is_geo_point, is_node, rekey, snapshot

_MODIFIERS = frozenset({"none", "log", "log1p", "log2p", "ln", "ln1p", "ln2p", "square", "sqrt", "reciprocal"})
_MULTI_VALUE_MODES = frozenset({"min", "max", "avg", "sum"})


class ScoreFunctionMixin(Node):
    """Base for score functions: ``{name: {...}}`` plus ``filter`` and ``weight``.

    A function created without a name only carries ``filter``/``weight``.
    """

    kind = SCORE_FUNCTION

    def __init__(self, name: str | None = None) -> None:
        super().__init__({name: {}} if name is not None else {})
        self._name = name

    @property
    def _body(self) -> dict[str, Any]:
        return self._json[self._name]

    def filter(self, filter_: Any = None) -> Any:
        """Restrict the function to documents matching a filter."""
        return self._node_accessor(self._json, "filter", filter_, is_filter, "a Filter")

    def weight(self, weight: float | None = None) -> Any:
        """Multiply the function's result by ``weight``.

        Raises:
            ArgumentTypeError: If ``weight`` is not a number.
        """
        if weight is None:
            return self._json.get("weight")
        if isinstance(weight, bool) or not isinstance(weight, Number):
            raise ArgumentTypeError("weight must be a number")
        self._json["weight"] = weight
        return self


class ScoreFunction(ScoreFunctionMixin):
    """Bare function: only ``filter`` and ``weight``."""

    def __init__(self) -> None:
        super().__init__()


class BoostFactorScoreFunction(ScoreFunctionMixin):
    """Multiplies the score by a constant, un-normalized factor."""

    def __init__(self, boost: float) -> None:
        super().__init__()
        self._json["boost_factor"] = boost

    def boost(self, boost: float | None = None) -> Any:
        return self._accessor(self._json, "boost_factor", boost)


class ScriptScoreFunction(ScoreFunctionMixin):
    """Computes the score with a script."""

    def __init__(self, script: str | None = None) -> None:
        super().__init__("script_score")
        if script is not None:
            self.script(script)

    def script(self, script: str | None = None) -> Any:
        return self._accessor(self._body, "script", script)

    def lang(self, lang: str | None = None) -> Any:
        return self._accessor(self._body, "lang", lang)

    def params(self, params: dict[str, Any] | None = None) -> Any:
        return self._accessor(self._body, "params", params)


class RandomScoreFunction(ScoreFunctionMixin):
    def __init__(self) -> None:
        super().__init__("random_score")

    def seed(self, seed: int | None = None) -> Any:
        return self._accessor(self._body, "seed", seed)


class FieldValueFactorFunction(ScoreFunctionMixin):
    """Scores with a document field, optionally scaled and modified."""

    def __init__(self, field: str) -> None:
        super().__init__("field_value_factor")
        self._body["field"] = field

    def field(self, field: str | None = None) -> Any:
        return self._accessor(self._body, "field", field)

    def factor(self, factor: float | None = None) -> Any:
        return self._accessor(self._body, "factor", factor)

    def modifier(self, modifier: str | None = None) -> Any:
        return self._enum_accessor(self._body, "modifier", modifier, _MODIFIERS)


class DecayScoreFunction(ScoreFunctionMixin):
    """Scores by distance from an origin with a gauss, exp or linear curve.

    The fragment is ``{<curve>: {<field>: {origin, scale, offset, decay}}}``;
    switching curve keeps the per-field settings.
    """

    def __init__(self, field: str) -> None:
        super().__init__("gauss")
        self._field = field
        self._body[field] = {}

    @property
    def _options(self) -> dict[str, Any]:
        return self._body[self._field]

    def _switch(self, curve: str) -> DecayScoreFunction:
        rekey(self._json, self._name, curve)
        self._name = curve
        return self

    def gauss(self) -> DecayScoreFunction:
        return self._switch("gauss")

    def exp(self) -> DecayScoreFunction:
        return self._switch("exp")

    def linear(self) -> DecayScoreFunction:
        return self._switch("linear")

    def curve(self) -> str:
        """Return the active decay curve name."""
        return self._name

    def field(self, field: str | None = None) -> Any:
        if field is None:
            return self._field
        rekey(self._body, self._field, field)
        self._field = field
        return self

    def origin(self, origin: Any = None) -> Any:
        """Set the origin: a GeoPoint or a plain value (number, date string).

        Raises:
            ArgumentTypeError: If ``origin`` is a node other than a GeoPoint.
        """
        if origin is None:
            return self._options.get("origin")
        if is_geo_point(origin):
            self._options["origin"] = snapshot(origin)
        elif is_node(origin):
            raise ArgumentTypeError("origin must be a GeoPoint or a plain value")
        else:
            self._options["origin"] = origin
        return self

    def scale(self, scale: Any = None) -> Any:
        return self._accessor(self._options, "scale", scale)

    def offset(self, offset: Any = None) -> Any:
        return self._accessor(self._options, "offset", offset)

    def decay(self, decay: float | None = None) -> Any:
        return self._accessor(self._options, "decay", decay)

    def multi_value_mode(self, mode: str | None = None) -> Any:
        return self._enum_accessor(self._body, "multi_value_mode", mode, _MULTI_VALUE_MODES)
