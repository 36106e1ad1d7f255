"""Configuration loading with fail-fast behavior.

A config file is a single JSON object validated against CodecConfig. When no
path is given the pydantic defaults are used.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from rpcmsg.config.schema import DEFAULT_CONFIG, CodecConfig
from rpcmsg.core.errors import ConfigError

logger = logging.getLogger(__name__)


def load_config(path: Path | str | None = None) -> CodecConfig:
    """Load codec configuration from a JSON file.

    An empty file yields the defaults. A UTF-8 byte order mark is skipped.

    Args:
        path: Config file path. None returns the defaults.

    Returns:
        Validated CodecConfig object.

    Raises:
        ConfigError: If the file can't be read, contains invalid JSON, or fails
            validation.
    """
    if path is None:
        logger.debug("No config path given, using defaults")
        return DEFAULT_CONFIG

    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    try:
        data = json.loads(content) if content else {}
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    try:
        config = CodecConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}") from e

    logger.debug("Config loaded from: %s", path)
    return config
