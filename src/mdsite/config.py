"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:       str = "mdsite"
    chapter_prefix: str = Field(default="Chapter",   min_length=1, description="Name prefix of chapter directories")
    output_dir:     str = Field(default="dist",      min_length=1, description="Per-chapter output directory name")
    assets_dir:     str = Field(default="assets",    min_length=1, description="Per-chapter assets directory name")
    stylesheet:     str = Field(default="style.css", min_length=1, description="Shared stylesheet, relative to the build root")
    parser_config:  str = Field(default="gfm-like",  description="MarkdownIt parser preset name")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDSITE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSITE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
