"""Tests for TOML-backed logging and label configuration."""

import tomllib
from pathlib import Path

import pytest

from level_labels import LabelConfig, LevelLabelRegistry, LogConfig, SeverityLevel
from level_labels.errors import InvalidLevelError, InvalidOverrideError

EXAMPLE_CONFIG = Path(__file__).parent.parent / "config" / "logging.toml"


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "logging.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_example_config_file() -> None:
    config = LogConfig.from_toml(EXAMPLE_CONFIG)

    assert config.level == "INFO"
    assert config.console.colors is False
    assert dict(config.labels.labels) == {
        SeverityLevel.WARNING: "WARN",
        SeverityLevel.ERROR: "ERR",
        SeverityLevel.FATAL: "FTL",
    }


def test_optional_sections_use_defaults(tmp_path: Path) -> None:
    config = LogConfig.from_toml(_write(tmp_path, '[logging]\nlevel = "debug"\n'))

    assert config.level == "DEBUG"
    assert config.console.colors is True
    assert config.console.rich_tracebacks is False
    assert config.labels.labels == ()


def test_label_names_are_case_insensitive(tmp_path: Path) -> None:
    path = _write(tmp_path, '[logging.labels]\nWarning = "Warnung"\nFATAL = "Fatal"\n')

    labels = LogConfig.from_toml(path).labels

    assert labels.labels == ((SeverityLevel.WARNING, "Warnung"), (SeverityLevel.FATAL, "Fatal"))


def test_unknown_label_name_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, '[logging.labels]\nloud = "LOUD"\n')

    with pytest.raises(ValueError, match="loud"):
        LogConfig.from_toml(path)


def test_empty_label_text_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, '[logging.labels]\nerror = "  "\n')

    with pytest.raises(ValueError, match="Empty display text.*error"):
        LogConfig.from_toml(path)


def test_invalid_logging_level_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Invalid logging level"):
        LogConfig.from_toml(_write(tmp_path, '[logging]\nlevel = "LOUD"\n'))


def test_missing_logging_table_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Missing required configuration key"):
        LogConfig.from_toml(_write(tmp_path, '[other]\nkey = 1\n'))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        LogConfig.from_toml(tmp_path / "missing.toml")


def test_malformed_file(tmp_path: Path) -> None:
    with pytest.raises(tomllib.TOMLDecodeError):
        LogConfig.from_toml(_write(tmp_path, "[logging\nlevel = \n"))


def test_with_label_replaces_earlier_override() -> None:
    config = LabelConfig().with_label("warning", "WARN").with_label(SeverityLevel.WARNING, "W")

    assert config.labels == ((SeverityLevel.WARNING, "W"),)


def test_with_label_rejects_unknown_level() -> None:
    with pytest.raises(InvalidLevelError):
        LabelConfig().with_label(42, "x")


def test_apply_to_registry(registry: LevelLabelRegistry) -> None:
    LabelConfig().with_label("error", "ERR").with_label(SeverityLevel.TRACE, "TRC").apply_to(registry)

    assert registry.get_display_text(SeverityLevel.ERROR) == "ERR"
    assert registry.get_display_text(SeverityLevel.TRACE) == "TRC"
    assert registry.get_display_text(SeverityLevel.DEBUG) == "DEBUG"


def test_label_config_normalizes_levels() -> None:
    config = LabelConfig(labels=(("warning", "WARN"), (6, "ERR")))

    assert config.labels == ((SeverityLevel.WARNING, "WARN"), (SeverityLevel.ERROR, "ERR"))


@pytest.mark.parametrize("labels", [((42, ""),), ((42, "x"),), (("loud", "LOUD"),)])
def test_label_config_rejects_unknown_level(labels: tuple) -> None:
    with pytest.raises(InvalidLevelError):
        LabelConfig(labels=labels)


@pytest.mark.parametrize("text", ["", "   ", None])
def test_label_config_rejects_empty_text(text) -> None:
    with pytest.raises(InvalidOverrideError):
        LabelConfig(labels=((SeverityLevel.ERROR, text),))

    with pytest.raises(InvalidOverrideError):
        LabelConfig().with_label(SeverityLevel.ERROR, text)
