"""Round-trip helpers over the transport and JSON formats."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar

from notify_commons.config import CommonsConfig
from notify_commons.json_io import JsonObjectParser, JsonWriter
from notify_commons.transport import StreamInput, StreamOutput, Writeable

T = TypeVar("T")


class JsonWriteable(Protocol):
    def to_json(self, writer: JsonWriter) -> JsonWriter: ...


def recreate_object(obj: Writeable, reader: Callable[[StreamInput], T]) -> T:
    """Serialize *obj* to transport bytes and read it back with *reader*."""
    out = StreamOutput()
    obj.write_to(out)
    return reader(StreamInput(out.to_bytes()))


def get_json_string(
    obj: JsonWriteable,
    *,
    pretty: bool | None = None,
    config: CommonsConfig | None = None,
) -> str:
    """Render *obj* as JSON text.

    An explicit *pretty* wins over ``config.json_output.pretty``; compact otherwise.
    """
    if pretty is None:
        pretty = config.json_output.pretty if config is not None else False
    return obj.to_json(JsonWriter(pretty=pretty)).to_string()


def create_object_from_json_string(
    text: str | bytes,
    parse: Callable[[JsonObjectParser], T],
) -> T:
    """Decode *text* and hand the resulting parser to *parse*."""
    return parse(JsonObjectParser.from_string(text))
