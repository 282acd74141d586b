from __future__ import annotations

from pathlib import Path

import pytest

from bubblesort.config import DEFAULTS, load_config, load_settings


def test_load_config_defaults() -> None:
    cfg = load_config(None)
    assert cfg == DEFAULTS
    assert cfg is not DEFAULTS
    cfg["values"].append(1)
    assert DEFAULTS["values"] == [64, 34, 25, 12, 22, 11, 90]


def test_load_config_merges_yaml_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "run.yaml"
    path.write_text(
        "values: [3, 1, 2]\nlabels:\n  before: 'before:'\nlog_level: DEBUG\n",
        encoding="utf-8",
    )

    cfg = load_config(str(path), overrides={"early_exit": True, "log_level": "WARNING"})

    assert cfg["values"] == [3, 1, 2]
    assert cfg["labels"] == {"before": "before:", "after": "array after sorting:"}
    assert cfg["early_exit"] is True
    assert cfg["log_level"] == "WARNING"


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == DEFAULTS


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_settings_read_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BUBBLESORT_CONFIG", "custom.yaml")
    monkeypatch.setenv("BUBBLESORT_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.config_path == "custom.yaml"
    assert settings.log_level == "debug"


def test_settings_default_to_none(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BUBBLESORT_CONFIG", raising=False)
    monkeypatch.delenv("BUBBLESORT_LOG_LEVEL", raising=False)

    settings = load_settings()

    assert settings.config_path is None
    assert settings.log_level is None


def test_load_config_wraps_yaml_errors(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("values: [1, 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)
