"""Notification model objects."""

from notify_commons.model.webhook import Webhook

__all__ = ["Webhook"]
