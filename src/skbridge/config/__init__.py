"""Configuration exports."""

from .loader import load_settings
from .settings import BridgeSettings, configure, get_settings

__all__ = ["BridgeSettings", "configure", "get_settings", "load_settings"]
