"""Configuration for the cronexpand CLI."""

from cronexpand.config.loader import get_config_path, load_config, save_config
from cronexpand.config.schema import Config, LoggingConfig, OutputConfig

__all__ = ["Config", "LoggingConfig", "OutputConfig", "get_config_path", "load_config", "save_config"]
