"""notify-commons: shared model objects for the notification system."""

from notify_commons.errors import (
    InvalidArgumentError,
    JsonParseError,
    MalformedURLError,
    NotifyError,
    TransportError,
)
from notify_commons.logging_config import install_null_handler
from notify_commons.model import Webhook

install_null_handler()

__all__ = [
    "InvalidArgumentError",
    "JsonParseError",
    "MalformedURLError",
    "NotifyError",
    "TransportError",
    "Webhook",
]
