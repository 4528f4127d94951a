"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "richmd"
    output_format: str = Field(default="text", pattern="^(text|html|json)$", description="text, html or json")
    theme:         str = Field(default="warm", pattern="^(warm|light|dark)$", description="Colour theme for html output")
    font_size:     int = Field(default=15, ge=8, description="Base font size in px for html output")
    log_level:     str = Field(default="WARNING", description="Logging level name for the richmd logger")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then RICHMD_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"RICHMD_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
