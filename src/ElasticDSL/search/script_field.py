"""Fields computed by a script and returned with each hit."""

from __future__ import annotations

from typing import Any

from ElasticDSL.core.node import Node
from ElasticDSL.core.util import SCRIPT_FIELD


class ScriptField(Node):
    kind = SCRIPT_FIELD

    def __init__(self, name: str) -> None:
        super().__init__({name: {}})
        self._name = name

    @property
    def _body(self) -> dict[str, Any]:
        return self._json[self._name]

    def script(self, script: str | None = None) -> Any:
        return self._accessor(self._body, "script", script)

    def lang(self, lang: str | None = None) -> Any:
        return self._accessor(self._body, "lang", lang)

    def params(self, params: dict[str, Any] | None = None) -> Any:
        return self._accessor(self._body, "params", params)

    def ignore_failure(self, ignore: bool | None = None) -> Any:
        """Return no value instead of failing when the script errors."""
        return self._accessor(self._body, "ignore_failure", ignore)
