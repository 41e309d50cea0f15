"""Shared fixtures keeping global logging and label state isolated per test."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from level_labels import LevelLabelRegistry, get_registry
from level_labels.factory import _logging_state


@pytest.fixture(autouse=True)
def restore_labels() -> Iterator[None]:
    get_registry().restore_all()
    yield
    get_registry().restore_all()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    _logging_state.reset()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def registry() -> LevelLabelRegistry:
    return LevelLabelRegistry()
