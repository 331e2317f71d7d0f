"""URL validation shared by the notification model classes."""

from __future__ import annotations

import logging
from urllib.parse import SplitResult, urlsplit

from notify_commons.errors import InvalidArgumentError, MalformedURLError

logger = logging.getLogger(__name__)

HTTPS_SCHEME = "https"

# Schemes a URL may carry and still count as parseable.
KNOWN_SCHEMES: frozenset[str] = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})
_HOST_REQUIRED: frozenset[str] = frozenset({"http", "https", "ftp"})


def validate_url(url: str) -> SplitResult:
    """Parse *url* as an absolute URL and return its components.

    Raises ``MalformedURLError`` when the value is not a string, has no scheme,
    uses an unknown scheme, lacks a host where one is required, or carries an
    invalid port or IPv6 literal.
    """
    if not isinstance(url, str):
        msg = f"URL must be a string, got {type(url).__name__}"
        raise MalformedURLError(msg)

    try:
        url.encode("utf-8")
    except UnicodeEncodeError as exc:
        msg = f"URL is not valid UTF-8 text: {exc}"
        raise MalformedURLError(msg) from exc

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        msg = f"Malformed URL '{url}': {exc}"
        raise MalformedURLError(msg) from exc

    scheme = parts.scheme.lower()
    if not scheme:
        msg = f"No protocol: {url}"
        raise MalformedURLError(msg)
    if scheme not in KNOWN_SCHEMES:
        msg = f"Unknown protocol: {parts.scheme}"
        raise MalformedURLError(msg)

    if scheme in _HOST_REQUIRED:
        try:
            host = parts.hostname
            _ = parts.port
        except ValueError as exc:
            msg = f"Malformed URL '{url}': {exc}"
            raise MalformedURLError(msg) from exc
        if not host:
            msg = f"Missing host in URL: {url}"
            raise MalformedURLError(msg)

    return parts


def validate_https_url(url: str) -> str:
    """Return *url* unchanged if it is a well-formed absolute HTTPS URL.

    Raises ``MalformedURLError`` for unparseable input and
    ``InvalidArgumentError`` for any scheme other than ``https``.
    """
    parts = validate_url(url)
    if parts.scheme.lower() != HTTPS_SCHEME:
        logger.debug("Rejected non-HTTPS URL scheme: %s", parts.scheme)
        msg = f"Only HTTPS URLs are supported, got '{parts.scheme}'"
        raise InvalidArgumentError(msg)
    return url
