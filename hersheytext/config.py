"""Configuration for hersheytext.

Settings are read from a YAML file. Lookup order:

1. an explicit path passed to ``Config.load``
2. the ``HERSHEYTEXT_CONFIG`` environment variable
3. ``hersheytext.yaml`` in the current directory

A missing file yields the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from hersheytext.exceptions import ConfigError

CONFIG_ENV_VAR = "HERSHEYTEXT_CONFIG"
DEFAULT_CONFIG_NAME = "hersheytext.yaml"


@dataclass
class Config:
    """Runtime settings shared by the API and the CLI."""

    default_font: str = "futural"
    stroke_width: float = 2
    font_dirs: list[Path] = field(default_factory=list)
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config from a mapping, ignoring unknown keys."""
        config = cls()
        if "default_font" in data:
            config.default_font = str(data["default_font"])
        if "stroke_width" in data:
            try:
                config.stroke_width = float(data["stroke_width"])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"stroke_width must be a number, got {data['stroke_width']!r}") from e
        if "font_dirs" in data:
            dirs = data["font_dirs"] or []
            if isinstance(dirs, str):
                dirs = [dirs]
            config.font_dirs = [Path(d).expanduser() for d in dirs]
        if "log_level" in data:
            config.log_level = str(data["log_level"]).upper()
        return config

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from YAML.

        Args:
            path: Config file. Falls back to the environment variable and
                then to ``hersheytext.yaml`` in the working directory.

        Returns:
            Loaded config, or defaults when no file exists.

        Raises:
            ConfigError: If the file is unreadable or is not a mapping.
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            path = Path(env_path) if env_path else Path.cwd() / DEFAULT_CONFIG_NAME
        path = Path(path)

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read config {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a mapping, got {type(data).__name__}")
        return cls.from_dict(data)
