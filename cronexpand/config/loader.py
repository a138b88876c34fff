"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger

from cronexpand.config.schema import Config


def get_config_path() -> Path:
    """Default configuration file, ~/.cronexpand/config.json."""
    return Path.home() / ".cronexpand" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration, falling back to defaults when the file is missing or invalid."""
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Failed to load config from {}, using defaults: {}", path, e)

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Write ``config`` as JSON, creating parent directories."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
