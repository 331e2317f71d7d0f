"""Webhook destination: a validated HTTPS callback URL."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from notify_commons.errors import InvalidArgumentError
from notify_commons.json_io import JsonObjectParser, JsonWriter
from notify_commons.model.url import validate_https_url
from notify_commons.transport import StreamInput, StreamOutput

logger = logging.getLogger(__name__)

URL_TAG = "url"


@dataclass(frozen=True)
class Webhook:
    """Immutable HTTPS callback URL used as a notification destination.

    The URL is stored exactly as given; fragment and query survive every
    round-trip.
    """

    url: str

    def __post_init__(self) -> None:
        validate_https_url(self.url)

    # -- Transport --

    def write_to(self, out: StreamOutput) -> None:
        out.write_string(self.url)

    @classmethod
    def from_stream(cls, inp: StreamInput) -> Webhook:
        """Read a Webhook written by ``write_to``. The URL is re-validated."""
        return cls(inp.read_string())

    # -- JSON --

    def to_json(self, writer: JsonWriter) -> JsonWriter:
        return writer.start_object().field(URL_TAG, self.url).end_object()

    def to_dict(self) -> dict[str, Any]:
        return {URL_TAG: self.url}

    @classmethod
    def parse(cls, parser: JsonObjectParser) -> Webhook:
        """Build a Webhook from a JSON object; unknown fields are ignored."""
        url: str | None = None
        for field_name in parser:
            if field_name == URL_TAG:
                url = parser.text()
            else:
                parser.skip_children()
        if url is None:
            logger.debug("Webhook JSON without '%s' field", URL_TAG)
            msg = f"'{URL_TAG}' field absent"
            raise InvalidArgumentError(msg)
        return cls(url)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Webhook:
        return cls.parse(JsonObjectParser(data))
