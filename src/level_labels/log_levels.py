"""Severity level definitions and validation constants."""

from enum import IntEnum
from typing import Literal, get_args

from .errors import InvalidLevelError

# Standard library levels accepted for the logging system itself
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_LEVELS = frozenset(get_args(LogLevel))


class SeverityLevel(IntEnum):
    """Closed, ordered set of severity levels understood by the label registry."""

    DISABLED = 0
    TRACE = 1
    DEBUG = 2
    VERBOSE = 3
    MESSAGE = 4
    WARNING = 5
    ERROR = 6
    FATAL = 7
    CRITICAL = 8

    # Alias, not a member of its own
    DEFAULT = MESSAGE

    @classmethod
    def parse(cls, value: "SeverityLevel | int | str") -> "SeverityLevel":
        """Convert a member, an ordinal or a case-insensitive name into a level.

        Args:
            value: Value to convert

        Returns:
            Matching SeverityLevel

        Raises:
            InvalidLevelError: If the value does not name a known level
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member

        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidLevelError(value, cls) from e

        raise InvalidLevelError(value, cls)

    @classmethod
    def from_stdlib_name(cls, method_name: str) -> "SeverityLevel | None":
        """Map a structlog/stdlib level or method name onto a severity level.

        Args:
            method_name: Name such as "info" or "WARNING"

        Returns:
            Matching SeverityLevel, or None if the name is unknown
        """
        return _STDLIB_NAMES.get(method_name.lower())

    def to_stdlib_name(self) -> str:
        """Return the lower-case stdlib level name closest to this level."""
        return _STDLIB_COUNTERPARTS[self]

    def to_syslog_severity(self) -> int:
        """Return the RFC 5424 severity number for this level.

        Raises:
            InvalidLevelError: For DISABLED, which has no syslog counterpart
        """
        try:
            return _SYSLOG_SEVERITIES[self]
        except KeyError as e:
            raise InvalidLevelError(self, SeverityLevel) from e


def default_display_text(level: SeverityLevel) -> str:
    """Return the default display text of a level, its upper-cased name."""
    return level.name.upper()


_STDLIB_NAMES = {
    "notset": SeverityLevel.DISABLED,
    "trace": SeverityLevel.TRACE,
    "debug": SeverityLevel.DEBUG,
    "verbose": SeverityLevel.VERBOSE,
    "info": SeverityLevel.MESSAGE,
    "message": SeverityLevel.MESSAGE,
    "warn": SeverityLevel.WARNING,
    "warning": SeverityLevel.WARNING,
    "error": SeverityLevel.ERROR,
    "exception": SeverityLevel.ERROR,
    "fatal": SeverityLevel.FATAL,
    "critical": SeverityLevel.CRITICAL,
}

_STDLIB_COUNTERPARTS = {
    SeverityLevel.DISABLED: "notset",
    SeverityLevel.TRACE: "debug",
    SeverityLevel.DEBUG: "debug",
    SeverityLevel.VERBOSE: "info",
    SeverityLevel.MESSAGE: "info",
    SeverityLevel.WARNING: "warning",
    SeverityLevel.ERROR: "error",
    SeverityLevel.FATAL: "critical",
    SeverityLevel.CRITICAL: "critical",
}

_SYSLOG_SEVERITIES = {
    SeverityLevel.TRACE: 7,     # Debug
    SeverityLevel.DEBUG: 7,     # Debug
    SeverityLevel.VERBOSE: 6,   # Informational
    SeverityLevel.MESSAGE: 5,   # Notice
    SeverityLevel.WARNING: 4,   # Warning
    SeverityLevel.ERROR: 3,     # Error
    SeverityLevel.FATAL: 2,     # Critical
    SeverityLevel.CRITICAL: 1,  # Alert
}
