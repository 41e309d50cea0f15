"""structlog processors rendering level fields through the label registry."""

from collections.abc import Mapping
from typing import Any

import structlog
from structlog.types import EventDict, WrappedLogger

from .log_levels import SeverityLevel
from .registry import LevelLabelRegistry, get_registry


class DisplayLevelRenderer:
    """Replace the level name of an event with its registered display text.

    The level is taken from a ``severity_level`` key holding a SeverityLevel when
    the event carries one, otherwise from the name ``structlog.stdlib.add_log_level``
    stored under ``key``. Level names without a severity counterpart are left
    untouched, as is a ``severity_level`` value that is not a SeverityLevel.

    Must run after ``add_log_level``.

    Args:
        registry:   Registry to read display texts from, the process-scoped one if None
        key:        Event key holding the level
    """

    def __init__(self, registry: LevelLabelRegistry | None = None, key: str = "level") -> None:
        self._registry = registry
        self._key = key

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        registry = self._registry if self._registry is not None else get_registry()

        if isinstance(event_dict.get("severity_level"), SeverityLevel):
            severity = event_dict.pop("severity_level")
        else:
            name = event_dict.get(self._key, method_name)
            severity = SeverityLevel.from_stdlib_name(name) if isinstance(name, str) else None

        if severity is not None:
            event_dict[self._key] = registry.get_display_text(severity)

        return event_dict


def display_level_styles(labels: Mapping[SeverityLevel, str], colors: bool = True) -> dict[str, str]:
    """Build ConsoleRenderer level styles keyed by display text.

    Each display text gets the style of its level's stdlib counterpart. The
    stdlib names keep their own styles for events that were never relabeled.

    Args:
        labels: Display text per severity level
        colors: Whether to use colorful styles

    Returns:
        Level styles for ``structlog.dev.ConsoleRenderer``
    """
    base = structlog.dev.ConsoleRenderer.get_default_level_styles(colors)
    styles = dict(base)
    for level, text in labels.items():
        styles[text] = base[level.to_stdlib_name()]
    return styles


class DisplayLevelConsoleRenderer:
    """ConsoleRenderer whose level colors follow the registered display texts.

    ConsoleRenderer fixes its level styles when it is created, so the inner
    renderer is rebuilt whenever the registry's display texts change.

    Args:
        registry:           Registry to read display texts from, the process-scoped one if None
        colors:             Enable colored output
        **renderer_kwargs:  Passed through to ``structlog.dev.ConsoleRenderer``
    """

    def __init__(
            self,
            registry: LevelLabelRegistry | None = None,
            colors: bool = True,
            **renderer_kwargs: Any
    ) -> None:
        self._registry = registry
        self._colors = colors
        self._renderer_kwargs = renderer_kwargs
        self._labels: dict[SeverityLevel, str] | None = None
        self._renderer: structlog.dev.ConsoleRenderer | None = None

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        registry = self._registry if self._registry is not None else get_registry()
        labels = dict(registry.snapshot())

        renderer = self._renderer
        if renderer is None or labels != self._labels:
            renderer = structlog.dev.ConsoleRenderer(
                colors=self._colors,
                level_styles=display_level_styles(labels, self._colors),
                **self._renderer_kwargs
            )
            self._renderer, self._labels = renderer, labels

        return renderer(logger, method_name, event_dict)
