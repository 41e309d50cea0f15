"""Registry of display texts used when rendering severity levels.

This module holds the mapping from each severity level to the text a formatter
prints for it. Every level starts out with its upper-cased name and can be
overridden (e.g. for localization) or reset at any time.

A single process-scoped registry backs the module level functions. Changes made
through it are global and visible to every logger rendering levels with it.
Components that want isolated state can construct their own registry and pass
it explicitly.

Each individual read or write is guarded by a lock. Sequences of calls, such as
reading a label and restoring it later, are not atomic and need the caller's own
synchronization.
"""

import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Final

import structlog

from .errors import InvalidLevelError, InvalidOverrideError
from .log_levels import SeverityLevel, default_display_text

logger = structlog.get_logger(__name__)

# One entry per severity level, a level missing here fails the registry check
_DEFAULT_LABELS: Final = {
    SeverityLevel.DISABLED: default_display_text(SeverityLevel.DISABLED),
    SeverityLevel.TRACE: default_display_text(SeverityLevel.TRACE),
    SeverityLevel.DEBUG: default_display_text(SeverityLevel.DEBUG),
    SeverityLevel.VERBOSE: default_display_text(SeverityLevel.VERBOSE),
    SeverityLevel.MESSAGE: default_display_text(SeverityLevel.MESSAGE),
    SeverityLevel.WARNING: default_display_text(SeverityLevel.WARNING),
    SeverityLevel.ERROR: default_display_text(SeverityLevel.ERROR),
    SeverityLevel.FATAL: default_display_text(SeverityLevel.FATAL),
    SeverityLevel.CRITICAL: default_display_text(SeverityLevel.CRITICAL),
}


def validate_display_text(text: Any) -> str:
    """Validate a replacement display text.

    Returns:
        The text, unchanged

    Raises:
        InvalidOverrideError: If text is not a string with visible characters
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidOverrideError("text", text)
    return text


class LevelLabelRegistry:
    """Mutable mapping from severity level to display text.

    Attributes:
        _labels:    Current display text per severity level
        _lock:      Threading lock guarding reads and writes of _labels
    """

    def __init__(self) -> None:
        """Initialize the registry with the default display texts."""
        self._labels: dict[SeverityLevel, str] = dict(_DEFAULT_LABELS)
        self._lock: Final = threading.Lock()

        # Stripped under `python -O`
        assert len(SeverityLevel) == len(self._labels), (
            f"Found {len(SeverityLevel)} severity levels but only "
            f"{len(self._labels)} display texts have been configured."
        )

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[SeverityLevel]:
        return iter(self.snapshot())

    def __contains__(self, level: object) -> bool:
        try:
            self._ensure_known(level)
        except InvalidLevelError:
            return False
        return True

    def get_display_text(self, level: SeverityLevel) -> str:
        """Get the display text currently registered for a level.

        Args:
            level: Severity level to look up

        Returns:
            The overridden display text, or the default one if none was registered

        Raises:
            InvalidLevelError: If level is not a known severity level
        """
        key = self._ensure_known(level)
        with self._lock:
            return self._labels[key]

    def restore_default_text(self, level: SeverityLevel) -> None:
        """Discard any override and restore the default display text of a level.

        Args:
            level: Severity level to reset

        Raises:
            InvalidLevelError: If level is not a known severity level
        """
        key = self._ensure_known(level)
        text = default_display_text(key)
        with self._lock:
            self._labels[key] = text

        logger.debug("Display text restored", for_level=key.name, text=text)

    def register_display_text(self, level: SeverityLevel, text: str) -> None:
        """Override the display text of a level.

        Args:
            level:  Severity level to change
            text:   New display text, stored as given

        Raises:
            InvalidLevelError:      If level is not a known severity level
            InvalidOverrideError:   If text is empty or consists of whitespace only
        """
        key = self._ensure_known(level)
        validate_display_text(text)
        with self._lock:
            self._labels[key] = text

        logger.debug("Display text registered", for_level=key.name, text=text)

    def restore_all(self) -> None:
        """Restore the default display text of every level."""
        with self._lock:
            for level in self._labels:
                self._labels[level] = default_display_text(level)

        logger.debug("All display texts restored")

    def apply(self, overrides: Mapping[SeverityLevel, str]) -> None:
        """Register several display texts at once.

        All pairs are validated before the first one is written, so an invalid
        pair leaves the registry unchanged.

        Args:
            overrides: Display text per severity level

        Raises:
            InvalidLevelError:      If any key is not a known severity level
            InvalidOverrideError:   If any text is empty or whitespace only
        """
        validated = []
        for level, text in overrides.items():
            key = self._ensure_known(level)
            validate_display_text(text)
            validated.append((key, text))

        with self._lock:
            self._labels.update(validated)

        for key, text in validated:
            logger.debug("Display text registered", for_level=key.name, text=text)

    def snapshot(self) -> Mapping[SeverityLevel, str]:
        """Get a read-only copy of the current display texts.

        Returns:
            Immutable mapping that does not follow later changes
        """
        with self._lock:
            return MappingProxyType(dict(self._labels))

    def _ensure_known(self, level: Any) -> SeverityLevel:
        """Validate that a value is one of the registered severity levels.

        Args:
            level: Value to validate

        Returns:
            The value as a SeverityLevel member

        Raises:
            InvalidLevelError: If the value is not a key of the registry
        """
        if isinstance(level, int) and not isinstance(level, bool):
            with self._lock:
                known = level in self._labels
            if known:
                return SeverityLevel(level)

        raise InvalidLevelError(level, SeverityLevel)


# Process-scoped registry
_registry: Final = LevelLabelRegistry()


def get_registry() -> LevelLabelRegistry:
    """Get the process-scoped registry used by the module level functions."""
    return _registry


def get_display_text(level: SeverityLevel) -> str:
    """Get the display text of a level from the process-scoped registry."""
    return _registry.get_display_text(level)


def restore_default_text(level: SeverityLevel) -> None:
    """Restore the default display text of a level in the process-scoped registry."""
    _registry.restore_default_text(level)


def register_display_text(level: SeverityLevel, text: str) -> None:
    """Override the display text of a level in the process-scoped registry."""
    _registry.register_display_text(level, text)
