"""Forward-only JSON object parser and a small JSON object writer."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from notify_commons.errors import InvalidArgumentError, JsonParseError

logger = logging.getLogger(__name__)


def _reject_constant(token: str) -> Any:
    msg = f"Non-standard JSON token: {token}"
    raise JsonParseError(msg)


class JsonObjectParser:
    """Walk the fields of one JSON object, one at a time.

    Iterating the parser yields field names in document order. While a field
    is current, its value can be read with ``text()`` / ``value()`` or dropped
    with ``skip_children()``. Each field is visited once.
    """

    def __init__(self, content: Mapping[str, Any]) -> None:
        if not isinstance(content, Mapping):
            msg = f"Expected a JSON object, got {type(content).__name__}"
            raise JsonParseError(msg)
        self._fields = iter(content.items())
        self._current: tuple[str, Any] | None = None

    @classmethod
    def from_string(cls, text: str | bytes) -> JsonObjectParser:
        """Decode *text* and return a parser positioned before its first field."""
        try:
            content = json.loads(text, parse_constant=_reject_constant)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            msg = f"Malformed JSON: {exc}"
            raise JsonParseError(msg) from exc
        return cls(content)

    def __iter__(self) -> Iterator[str]:
        for name, value in self._fields:
            self._current = (name, value)
            yield name
        self._current = None

    @property
    def current_name(self) -> str | None:
        return self._current[0] if self._current is not None else None

    def value(self) -> Any:
        if self._current is None:
            msg = "No current field to read"
            raise JsonParseError(msg)
        return self._current[1]

    def text(self) -> str:
        """Return the current value, which must be a JSON string."""
        value = self.value()
        if not isinstance(value, str):
            msg = f"Field '{self.current_name}' must be a string, got {type(value).__name__}"
            raise InvalidArgumentError(msg)
        return value

    def skip_children(self) -> None:
        """Drop the current field together with any nested object or array."""
        if self._current is not None:
            logger.debug("Skipping field '%s'", self._current[0])
        self._current = None


class JsonWriter:
    """Build a JSON object incrementally and render it as text."""

    def __init__(self, *, pretty: bool = False) -> None:
        self._pretty = pretty
        self._stack: list[dict[str, Any]] = []
        self._root: dict[str, Any] | None = None

    def start_object(self, name: str | None = None) -> JsonWriter:
        obj: dict[str, Any] = {}
        if self._stack:
            if name is None:
                msg = "Nested object needs a field name"
                raise InvalidArgumentError(msg)
            self._stack[-1][name] = obj
        elif self._root is not None:
            msg = "Root object already written"
            raise InvalidArgumentError(msg)
        self._stack.append(obj)
        return self

    def field(self, name: str, value: Any) -> JsonWriter:
        if not self._stack:
            msg = f"Cannot write field '{name}' outside an object"
            raise InvalidArgumentError(msg)
        self._stack[-1][name] = value
        return self

    def end_object(self) -> JsonWriter:
        if not self._stack:
            msg = "end_object() without matching start_object()"
            raise InvalidArgumentError(msg)
        obj = self._stack.pop()
        if not self._stack:
            self._root = obj
        return self

    def to_dict(self) -> dict[str, Any]:
        if self._stack or self._root is None:
            msg = "JSON object is incomplete"
            raise InvalidArgumentError(msg)
        return self._root

    def to_string(self) -> str:
        root = self.to_dict()
        if self._pretty:
            return json.dumps(root, indent=2, ensure_ascii=False)
        return json.dumps(root, separators=(",", ":"), ensure_ascii=False)
