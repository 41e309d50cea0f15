"""Handler creation and configuration for label-aware logging.

This module provides factory functions for creating and configuring logging handlers
whose level field is rendered through a level label registry.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from .config import ConsoleHandlerConfig
from .processors import DisplayLevelConsoleRenderer, DisplayLevelRenderer
from .registry import LevelLabelRegistry

# Default processor configurations
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_TIMESTAMP_UTC = False


def create_shared_processors(registry: LevelLabelRegistry | None = None) -> list[Processor]:
    """Create the list of shared structlog processors.

    These processors are used for both structlog and foreign (stdlib) log records
    to provide consistent enrichment, including the display text of the level.

    Args:
        registry: Registry providing display texts, the process-scoped one if None

    Returns:
        List of structlog processors
    """
    return [
        # Context management
        structlog.contextvars.merge_contextvars,

        # Standard library integration
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),

        # Level display text, after add_log_level
        DisplayLevelRenderer(registry),

        # Error handling and stack traces
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,

        # Timestamp handling
        structlog.processors.TimeStamper(
            fmt=DEFAULT_TIMESTAMP_FORMAT,
            utc=DEFAULT_TIMESTAMP_UTC
        ),
    ]


def create_console_handler(
        config: ConsoleHandlerConfig,
        shared_processors: list[Processor],
        registry: LevelLabelRegistry | None = None
) -> logging.Handler:
    """Create and configure a console logging handler.

    Creates a StreamHandler with structlog formatting that outputs to stdout.
    Level colors follow the display texts registered on the registry, so
    relabeled levels keep the color of their stdlib counterpart.

    Args:
        config:             Console handler configuration settings
        shared_processors:  List of shared structlog processors to use
        registry:           Registry providing display texts, the process-scoped one if None

    Returns:
        Configured StreamHandler instance
    """
    exception_formatter = (
        structlog.dev.rich_traceback
        if config.rich_tracebacks
        else structlog.dev.plain_traceback
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            DisplayLevelConsoleRenderer(
                registry,
                colors=config.colors,
                exception_formatter=exception_formatter
            ),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    return handler
