"""File names used by the tool and the main configuration file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomli_w

CONFIG_FILE_NAME = "config.toml"
MODEL_FILE_NAME = "models.json"
ALIASES_CONFIG_FILE = "aliases.toml"
KEYS_CONFIG_FILE = "keys.toml"
TEMPLATES_DIR_NAME = "templates"
BINARY_NAME = "rullm"

DEFAULT_MODEL = "openai/gpt-4o-mini"


@dataclass
class Config:
    """User settings kept in ``config.toml``."""

    default_model: str | None = DEFAULT_MODEL
    vi_mode: bool = False

    @classmethod
    def load(cls, base_path: str | Path) -> Config:
        """Read the configuration, writing a default file if none exists."""
        config_path = Path(base_path) / CONFIG_FILE_NAME
        if not config_path.exists():
            config = cls()
            config.save(base_path)
            return config

        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        config = cls()
        if "default_model" in data:
            if not isinstance(data["default_model"], str):
                raise ValueError("default_model must be a string")
            config.default_model = data["default_model"]
        if "vi_mode" in data:
            if not isinstance(data["vi_mode"], bool):
                raise ValueError("vi_mode must be a boolean")
            config.vi_mode = data["vi_mode"]
        return config

    def save(self, base_path: str | Path) -> None:
        """Write the configuration to ``config.toml`` under ``base_path``."""
        config_path = Path(base_path) / CONFIG_FILE_NAME
        config_path.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, object] = {}
        if self.default_model is not None:
            data["default_model"] = self.default_model
        data["vi_mode"] = self.vi_mode
        config_path.write_text(tomli_w.dumps(data), encoding="utf-8")