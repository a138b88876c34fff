"""cronexpand - expand cron expressions into the values they match."""

from loguru import logger

from cronexpand.cron import CronExpressionError, Schedule, parse_schedule

__version__ = "0.1.0"

logger.disable("cronexpand")

__all__ = ["CronExpressionError", "Schedule", "parse_schedule", "__version__"]
