"""Shared test fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Location of a config.json that does not exist yet."""
    return tmp_path / "config.json"


@pytest.fixture
def library_logging() -> Iterator[logging.Logger]:
    """The notify_commons logger; handlers added during the test are removed."""
    from notify_commons.logging_config import disable_logging, library_logger

    yield library_logger()
    disable_logging()
