"""Configuration helpers: YAML run configs and environment settings."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .demo import AFTER_LABEL, BEFORE_LABEL, DEFAULT_VALUES

DEFAULTS: dict[str, Any] = {
    "values": list(DEFAULT_VALUES),
    "early_exit": False,
    "labels": {"before": BEFORE_LABEL, "after": AFTER_LABEL},
    "log_level": "INFO",
}


def _merge_dict(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *base* with *override* applied; nested mappings merge key by key."""

    merged = copy.deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        merged[key] = _merge_dict(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return merged


def load_config(path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    config = copy.deepcopy(DEFAULTS)
    if path:
        with Path(path).open("r", encoding="utf-8") as fh:
            try:
                file_cfg = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping at the top level")
        config = _merge_dict(config, file_cfg)
    if overrides:
        config = _merge_dict(config, overrides)
    return config


class BubbleSortSettings(BaseSettings):
    """Environment driven settings for the command line."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    config_path: str | None = Field(default=None, alias="BUBBLESORT_CONFIG")
    log_level: str | None = Field(default=None, alias="BUBBLESORT_LOG_LEVEL")


def load_settings() -> BubbleSortSettings:
    """Return settings initialised from environment."""

    return BubbleSortSettings()
