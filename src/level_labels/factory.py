"""Wire a label registry into structlog and standard library logging.

Logging is bound to one registry at a time: the process-scoped one unless the
builder names another. It can be configured once. Loggers requested earlier get
a console-only setup on the process-scoped registry.
"""

import logging
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Final

import structlog
from structlog.stdlib import BoundLogger

from .config import LogConfig
from .handlers import create_console_handler, create_shared_processors
from .log_levels import SeverityLevel
from .registry import LevelLabelRegistry, get_registry


class LabelledLogging:
    """Process-wide logging setup and the registry it renders levels with.

    Attributes:
        _config:    Applied configuration, None until configured
        _registry:  Registry the installed processors read display texts from
        _lock:      Serializes configuration
    """

    def __init__(self) -> None:
        self._config: LogConfig | None = None
        self._registry: LevelLabelRegistry = get_registry()
        self._lock: Final = threading.Lock()

    @property
    def configured(self) -> bool:
        return self._config is not None

    @property
    def registry(self) -> LevelLabelRegistry:
        """Registry whose display texts appear in the log output."""
        return self._registry

    def install(self, config: LogConfig, registry: LevelLabelRegistry) -> None:
        """Register the configured labels on registry and route logging through it.

        Raises:
            RuntimeError:           If logging has already been configured
            InvalidLevelError:      If a configured label names an unknown level
            InvalidOverrideError:   If a configured label is empty
        """
        with self._lock:
            if self._config is not None:
                msg = (
                    "Logging has already been configured. "
                    "configure_logging() should only be called once."
                )
                raise RuntimeError(msg)
            _route_logging(config, registry)
            config.labels.apply_to(registry)
            self._config, self._registry = config, registry

    def install_fallback(self) -> None:
        """Route logging through the process-scoped registry with default settings."""
        _route_logging(LogConfig.create_default(), get_registry())

    def reset(self) -> None:
        """Forget the configuration so logging can be configured again."""
        with self._lock:
            self._config, self._registry = None, get_registry()


_logging_state: Final = LabelledLogging()


@dataclass
class LoggingBuilder:
    """Fluent builder collecting display texts before logging is configured.

    Attributes:
        _base_config:   Configuration from TOML or defaults, plus builder labels
        _registry:      Registry receiving the display texts, the process-scoped one if None
    """

    _base_config: LogConfig
    _registry: LevelLabelRegistry | None = None

    def with_label(self, level: SeverityLevel | int | str, text: str) -> "LoggingBuilder":
        """Add a display text override, replacing one from the file for the same level.

        Raises:
            InvalidLevelError:      If level does not name a severity level
            InvalidOverrideError:   If text is empty or whitespace only
        """
        labels = self._base_config.labels.with_label(level, text)
        self._base_config = replace(self._base_config, labels=labels)
        return self

    def with_registry(self, registry: LevelLabelRegistry) -> "LoggingBuilder":
        """Render levels through registry instead of the process-scoped one."""
        self._registry = registry
        return self

    def build(self) -> None:
        """Register the collected display texts and configure logging.

        Raises:
            RuntimeError: If logging has already been configured
        """
        registry = self._registry if self._registry is not None else get_registry()
        _logging_state.install(self._base_config, registry)

        get_logger(__name__).info(
            "Logging configured",
            log_level=self._base_config.level,
            labels=len(self._base_config.labels.labels),
        )


def configure_logging(config_path: str | Path | None = None) -> LoggingBuilder:
    """Start configuring logging, from a TOML file if one is given.

    Args:
        config_path: Optional path to a TOML config file

    Returns:
        LoggingBuilder instance for method chaining
    """
    config = (
        LogConfig.from_toml(Path(config_path))
        if config_path is not None
        else LogConfig.create_default()
    )
    return LoggingBuilder(config)


def get_logger(name: str | None = None) -> BoundLogger:
    """Get a structlog logger, falling back to console-only logging if unconfigured."""
    if not _logging_state.configured:
        _logging_state.install_fallback()
    return structlog.get_logger(name)


def _route_logging(config: LogConfig, registry: LevelLabelRegistry) -> None:
    """Send structlog and stdlib records through one console handler using registry."""
    shared_processors = create_shared_processors(registry)
    handler = create_console_handler(config.console, shared_processors, registry)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.level)
