"""Configuration system for bff."""

from bff.config.loader import DEFAULT_CONFIG, load_config
from bff.config.schema import BffConfig

__all__ = ["DEFAULT_CONFIG", "load_config", "BffConfig"]
