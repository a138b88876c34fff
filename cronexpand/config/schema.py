"""Configuration schema using Pydantic."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ConfigDict
from pydantic_settings import BaseSettings


class Base(BaseModel):
    """Base model with convenient defaults."""

    model_config = ConfigDict(populate_by_name=True)


class OutputConfig(Base):
    """How expanded schedules are printed."""

    format: Literal["text", "json"] = "text"
    label_width: int = Field(default=14, ge=13)  # "day of month" plus one space


class LoggingConfig(Base):
    """Diagnostic output of the CLI."""

    verbose: bool = False


class Config(BaseSettings):
    """Root configuration for cronexpand."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(env_prefix="CRONEXPAND_", env_nested_delimiter="__")
