"""Type-safe configuration management leveraging Pydantic Settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml  # type: ignore[import-untyped]
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def read_yaml(path: str | Path) -> dict[str, Any]:
    """Read a YAML mapping; an empty file yields an empty mapping."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}

    if not isinstance(payload, dict):
        raise ValueError("Configuration file must contain a mapping at the root")
    return payload


class BridgeSettings(BaseSettings):
    """Process-wide bridge settings.

    Values load from YAML (or defaults) and can be overridden using env vars
    prefixed with ``SKBRIDGE_``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SKBRIDGE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        frozen=True,
    )

    ecosystem: str = "sklearn"
    install_url: str = "https://scikit-learn.org/stable/install.html"
    clone_safe: bool = True
    dedicated_thread: bool = True
    thread_name: str = "skbridge-foreign"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("ecosystem")
    @classmethod
    def _validate_ecosystem(cls, value: str) -> str:
        if not value or value.startswith(".") or value.endswith("."):
            raise ValueError("ecosystem must be an absolute module name")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @property
    def base_module(self) -> str:
        return f"{self.ecosystem}.base"

    @classmethod
    def from_yaml(cls, path: str | Path) -> BridgeSettings:
        return cls(**read_yaml(path))


_SETTINGS: BridgeSettings | None = None


def get_settings() -> BridgeSettings:
    """Return the process-wide settings, building defaults on first use."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = BridgeSettings()
    return _SETTINGS


def configure(settings: BridgeSettings | None = None) -> BridgeSettings:
    """Install ``settings`` as the process-wide configuration.

    Meant to be called once at startup, before any foreign dispatch happens.
    """

    global _SETTINGS
    _SETTINGS = settings if settings is not None else BridgeSettings()
    logging.getLogger("skbridge").setLevel(_SETTINGS.log_level)
    return _SETTINGS


__all__ = ["BridgeSettings", "configure", "get_settings", "read_yaml"]
