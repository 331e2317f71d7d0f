"""Tests for round-trip helpers."""

from __future__ import annotations

import json

from notify_commons.config import CommonsConfig, JsonOutputConfig
from notify_commons.model.webhook import Webhook
from notify_commons.serialization import (
    create_object_from_json_string,
    get_json_string,
    recreate_object,
)

URL = "https://domain.com/sample_url#1234567890"


class TestGetJsonString:
    def test_compact_by_default(self) -> None:
        assert "\n" not in get_json_string(Webhook(URL))

    def test_pretty_from_config(self) -> None:
        config = CommonsConfig(json_output=JsonOutputConfig(pretty=True))
        text = get_json_string(Webhook(URL), config=config)
        assert "\n" in text
        assert json.loads(text) == {"url": URL}

    def test_explicit_flag_wins(self) -> None:
        config = CommonsConfig(json_output=JsonOutputConfig(pretty=True))
        assert "\n" not in get_json_string(Webhook(URL), pretty=False, config=config)


class TestRoundTrips:
    def test_transport_preserves_fragment(self) -> None:
        assert recreate_object(Webhook(URL), Webhook.from_stream).url.endswith("#1234567890")

    def test_json_preserves_fragment(self) -> None:
        text = get_json_string(Webhook(URL), pretty=True)
        assert create_object_from_json_string(text, Webhook.parse).url == URL

    def test_bytes_input(self) -> None:
        text = get_json_string(Webhook(URL)).encode("utf-8")
        assert create_object_from_json_string(text, Webhook.parse) == Webhook(URL)
