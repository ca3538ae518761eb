"""postmd settings: where posts are read from, where Markdown goes, and how loudly to log.

Values are layered, later sources winning: field defaults, config.yaml in the
working directory, POSTMD_<FIELD> environment variables, then CLI options.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "POSTMD_"


class Settings(BaseModel):
    app_name:   str = "postmd"
    source_dir: str = Field(default="api/cG9zdC", description="Root scanned recursively for *.json post records")
    output_dir: str = Field(default="postMD",     description="Flat directory receiving one <slug>.md per post")
    log_level:  str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$",
                            description="Root logger level; --verbose forces DEBUG")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping in config.yaml, or {} when the file is absent or empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings from config.yaml, POSTMD_* env vars, and non-None overrides."""
    data = _read_config_file(Path(CONFIG_FILE))
    data.update({
        name: val for name in Settings.model_fields
        if (val := os.getenv(f"{ENV_PREFIX}{name.upper()}"))
    })
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
