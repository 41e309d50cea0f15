"""Display labels for severity levels, with structured logging integration.

This package keeps the text a logging formatter prints for each severity level.
Every level starts out with its upper-cased name (``SeverityLevel.WARNING`` is
rendered as ``"WARNING"``) and can be overridden, e.g. for localization, or
restored at runtime. The labels are applied to structlog output by a processor
that replaces the level field of each event with its registered display text.

Key Features:
    - Closed, ordered set of severity levels from DISABLED to CRITICAL
    - Process-scoped registry, plus independent registries for isolated state
    - Validation of levels and display texts before any change is made
    - structlog processor rendering the level field through a registry
    - TOML-based configuration of display texts and console output
    - Console-only fallback when logging is accessed before configuration

Basic Usage:
    ```python
    from level_labels import (
        SeverityLevel,
        configure_logging,
        get_display_text,
        get_logger,
        register_display_text,
        restore_default_text,
    )

    get_display_text(SeverityLevel.ERROR)           # "ERROR"
    register_display_text(SeverityLevel.ERROR, "ERR")
    get_display_text(SeverityLevel.ERROR)           # "ERR"
    restore_default_text(SeverityLevel.ERROR)
    get_display_text(SeverityLevel.ERROR)           # "ERROR"

    # Logging with custom labels
    configure_logging().with_label("warning", "WARN").build()
    logger = get_logger(__name__)
    logger.warning("Disk almost full")  # rendered as [WARN ...]
    ```

Configuration:
    ```toml
    [logging]
    level = "INFO"  # (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    [logging.console]
    colors = true
    rich_tracebacks = false

    [logging.labels]
    warning = "WARN"
    error = "ERR"
    ```

    All sections and fields are optional with sensible defaults.

Implementation Notes:
    - The registry guards each single read or write with a lock, sequences of
      calls need the caller's own synchronization
    - The check that every level has a display text runs at construction and
      is skipped under ``python -O``
    - Builder labels take precedence over labels from the configuration file
"""

from .config import LabelConfig, LogConfig
from .errors import InvalidLevelError, InvalidOverrideError, LevelLabelError
from .factory import configure_logging, get_logger
from .log_levels import SeverityLevel, default_display_text
from .processors import DisplayLevelConsoleRenderer, DisplayLevelRenderer
from .registry import (
    LevelLabelRegistry,
    get_display_text,
    get_registry,
    register_display_text,
    restore_default_text,
)

__all__ = [
    "DisplayLevelConsoleRenderer",
    "DisplayLevelRenderer",
    "InvalidLevelError",
    "InvalidOverrideError",
    "LabelConfig",
    "LevelLabelError",
    "LevelLabelRegistry",
    "LogConfig",
    "SeverityLevel",
    "configure_logging",
    "default_display_text",
    "get_display_text",
    "get_logger",
    "get_registry",
    "register_display_text",
    "restore_default_text",
]
