"""Library configuration loaded from config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from notify_commons.errors import ConfigError

logger = logging.getLogger(__name__)

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class JsonOutputConfig(BaseModel):
    """Settings for rendering model objects as JSON text."""

    pretty: bool = False


class CommonsConfig(BaseModel):
    """Top-level configuration loaded from config.json."""

    log_level: str = "INFO"
    log_dir: str | None = None
    json_output: JsonOutputConfig = Field(default_factory=JsonOutputConfig)


def load_config(config_path: Path) -> CommonsConfig:
    """Read *config_path*; a missing file yields defaults."""
    if not config_path.exists():
        logger.info("No config at %s, using defaults", config_path)
        return CommonsConfig()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Cannot read config {config_path}: {exc}"
        raise ConfigError(msg) from exc
    try:
        return CommonsConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid config {config_path}: {exc}"
        raise ConfigError(msg) from exc


def apply_config(config: CommonsConfig) -> None:
    """Enable library log output as configured."""
    from notify_commons.logging_config import enable_logging

    level_name = config.log_level.strip().upper()
    if level_name not in _LOG_LEVELS:
        msg = f"Unknown log_level '{config.log_level}'"
        raise ConfigError(msg)
    log_dir = Path(config.log_dir).expanduser() if config.log_dir else None
    enable_logging(logging.getLevelName(level_name), log_dir=log_dir)
