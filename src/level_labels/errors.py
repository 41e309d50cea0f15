"""Exceptions raised by the display label registry."""

from typing import Any


class LevelLabelError(ValueError):
    """Base class for all registry contract violations."""


class InvalidLevelError(LevelLabelError):
    """Raised when a value is not one of the known severity levels.

    Attributes:
        value:      The offending value as it was passed in
        expected:   The type the value was expected to be a member of
        parameter:  Name of the parameter that carried the value
    """

    def __init__(self, value: Any, expected: type, parameter: str = "level") -> None:
        self.value = value
        self.expected = expected
        self.parameter = parameter
        msg = (
            f"Invalid value for argument {parameter!r}: {value!r} "
            f"is not a valid {expected.__name__}"
        )
        super().__init__(msg)


class InvalidOverrideError(LevelLabelError):
    """Raised when a replacement display text is empty or whitespace only.

    Attributes:
        parameter:  Name of the rejected parameter
        value:      The rejected value
    """

    def __init__(self, parameter: str, value: Any = None) -> None:
        self.parameter = parameter
        self.value = value
        msg = f"Argument {parameter!r} must be a non-empty, non-whitespace string, got {value!r}"
        super().__init__(msg)
