"""Configuration loader for bff."""

from __future__ import annotations

from pathlib import Path

import yaml

from bff.config.schema import BffConfig

DEFAULT_CONFIG = Path("~/.config/bff/bff.yaml")


def load_config(path: Path | str | None = None) -> BffConfig:
    """Load configuration from a YAML file.

    If path is None or the file doesn't exist, returns defaults.
    Raises ValueError for malformed YAML.
    """
    if path is None:
        return BffConfig()

    path = Path(path).expanduser().resolve()
    if not path.is_file():
        return BffConfig()

    text = path.read_text()
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {path}: {e}") from e

    if data is None or not isinstance(data, dict):
        return BffConfig()

    return BffConfig(**data)
