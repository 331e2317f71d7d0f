"""Project-level exception hierarchy."""


class NotifyError(Exception):
    """Base for all notify-commons exceptions."""


class InvalidArgumentError(NotifyError, ValueError):
    """A value is well-formed but violates a model rule."""


class MalformedURLError(NotifyError, ValueError):
    """A URL string cannot be parsed as an absolute URL."""


class JsonParseError(NotifyError, ValueError):
    """JSON input is not well-formed."""


class TransportError(NotifyError):
    """Transport stream is truncated or corrupt."""


class ConfigError(NotifyError):
    """Configuration file is unreadable or invalid."""
