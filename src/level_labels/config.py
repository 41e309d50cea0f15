"""Configuration handling for display labels and logging output.

This module provides configuration classes and TOML parsing functionality for the
level label registry and the logging setup built around it. It defines the
configuration schema and validation rules for label overrides and console output.
"""

from dataclasses import dataclass
from pathlib import Path

import tomllib

from .errors import InvalidLevelError, InvalidOverrideError
from .log_levels import VALID_LOG_LEVELS, LogLevel, SeverityLevel
from .registry import LevelLabelRegistry, validate_display_text


@dataclass(frozen=True, slots=True)
class ConsoleHandlerConfig:
    """Configuration for console-based logging output.

    Attributes:
        colors:             Enable colored output for the console (requires 'colorama' library on Windows)
        rich_tracebacks:    Enable rich tracebacks formatting (requires 'rich' library)
    """

    colors: bool
    rich_tracebacks: bool


@dataclass(frozen=True, slots=True)
class LabelConfig:
    """Display text overrides to register on a label registry.

    Attributes:
        labels: Level and display text pairs in the order they were configured
    """

    labels: tuple[tuple[SeverityLevel, str], ...] = ()

    def __post_init__(self) -> None:
        """Validate and normalize the pairs after initialization.

        Raises:
            InvalidLevelError:      If a level is not a known severity level
            InvalidOverrideError:   If a display text is empty or whitespace only
        """
        labels = tuple(
            (SeverityLevel.parse(level), validate_display_text(text))
            for level, text in self.labels
        )
        object.__setattr__(self, "labels", labels)

    def with_label(self, level: SeverityLevel | int | str, text: str) -> "LabelConfig":
        """Create a new instance with an additional override.

        A later override for the same level replaces the earlier one.

        Args:
            level:  Severity level, ordinal or level name
            text:   Display text to register

        Returns:
            New LabelConfig instance with the additional override
        """
        parsed = SeverityLevel.parse(level)
        validate_display_text(text)
        kept = tuple(pair for pair in self.labels if pair[0] is not parsed)
        return LabelConfig(labels=(*kept, (parsed, text)))

    def apply_to(self, registry: LevelLabelRegistry) -> None:
        """Register every configured override on a registry.

        Args:
            registry: Registry receiving the display texts
        """
        registry.apply(dict(self.labels))


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Complete logging configuration settings.

    Attributes:
        level:      Logging level to use (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console:    ConsoleHandlerConfig instance for console-based logging settings
        labels:     LabelConfig with display text overrides for severity levels
    """

    level: LogLevel
    console: ConsoleHandlerConfig
    labels: LabelConfig

    def __post_init__(self) -> None:
        """Validate configuration values after initialization.

        Raises:
            ValueError: If the logging level is invalid
        """
        if self.level in VALID_LOG_LEVELS:
            return
        msg = (
            f"Invalid logging level: {self.level!r}. "
            f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
        raise ValueError(msg)

    @classmethod
    def from_toml(cls, config_path: Path) -> "LogConfig":
        """Create LogConfig instance from a TOML configuration file.

        Args:
            config_path: Path to the TOML configuration file

        Returns:
            Configured LogConfig instance

        Raises:
            ValueError: If required configuration keys are missing or if values are invalid
        """
        config_data = cls._load_toml(config_path)

        try:
            return cls._parse_config(config_data)

        except KeyError as e:
            msg = f"Missing required configuration key: {e.args[0]}"
            raise ValueError(msg) from e

        except (TypeError, ValueError) as e:
            msg = f"Invalid value in configuration file: {e!s}"
            raise ValueError(msg) from e

    @classmethod
    def _load_toml(cls, config_path: Path) -> dict:
        """Load and parse the TOML configuration file.

        Args:
            config_path: Path to the TOML configuration file

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundError:  If the configuration file doesn't exist
            TOMLDecodeError:    If the TOML file is malformed
        """
        try:
            with config_path.open("rb") as f:
                return tomllib.load(f)

        except FileNotFoundError as e:
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg) from e

        except tomllib.TOMLDecodeError as e:
            msg = f"Failed to parse TOML file {config_path}"
            raise tomllib.TOMLDecodeError(msg) from e

    @classmethod
    def _parse_config(cls, config_data: dict) -> "LogConfig":
        """Parse the configuration dictionary into a LogConfig instance.

        Args:
            config_data: Dictionary containing the configuration data

        Returns:
            Configured LogConfig instance
        """
        logging_config = config_data["logging"]

        return cls(
            level=logging_config.get("level", "INFO").upper(),
            console=cls._create_console_config(logging_config.get("console", {})),
            labels=cls._create_label_config(logging_config.get("labels", {}))
        )

    @staticmethod
    def _create_console_config(console_config: dict) -> ConsoleHandlerConfig:
        """Create a ConsoleHandlerConfig from the configuration dictionary.

        Args:
            console_config: Dictionary containing console handler configuration

        Returns:
            Configured ConsoleHandlerConfig instance
        """
        return ConsoleHandlerConfig(
            colors=bool(console_config.get("colors", True)),
            rich_tracebacks=bool(console_config.get("rich_tracebacks", False))
        )

    @staticmethod
    def _create_label_config(label_config: dict) -> LabelConfig:
        """Create a LabelConfig from the configuration dictionary.

        Args:
            label_config: Dictionary mapping severity level names to display texts

        Returns:
            Configured LabelConfig instance

        Raises:
            ValueError: If a key does not name a severity level or a text is empty
        """
        config = LabelConfig()
        # Process labels in the order they appear in the TOML
        for name, text in label_config.items():
            try:
                config = config.with_label(name, text)
            except InvalidLevelError as e:
                msg = f"Unknown severity level in [logging.labels]: {name!r}"
                raise ValueError(msg) from e
            except InvalidOverrideError as e:
                msg = f"Empty display text in [logging.labels] for {name!r}"
                raise ValueError(msg) from e

        return config

    @classmethod
    def create_default(cls) -> "LogConfig":
        """Create a default LogConfig instance.

        Creates a configuration with sensible defaults:
        - INFO level logging
        - Console logging enabled with colors, plain tracebacks
        - No display text overrides

        Returns:
            LogConfig instance with default settings
        """
        return cls(
            level="INFO",
            console=ConsoleHandlerConfig(
                colors=True,
                rich_tracebacks=False
            ),
            labels=LabelConfig()
        )
