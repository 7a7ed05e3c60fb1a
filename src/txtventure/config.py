"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "TXTVENTURE_"


class Settings(BaseModel):
    filename:    str  = Field(default="script.md",       description="Source document to split")
    encoding:    str  = Field(default="utf-8",           description="Source document encoding")
    hostname:    str  = Field(default="http://text.dog", description="Base URL links resolve against")
    destination: str  = Field(default="txtventure",      description="Path under the host and base_path")
    base_path:   str  = Field(default="out",             description="Local directory files are written under")
    art_path:    str  = Field(default="",                description="Directory of <id>.txt art; empty disables")
    path_map:    dict[str, str] = Field(
        default_factory=lambda: {"humans-txt": "humans.txt"},
        description="Per-id path templates ({id}, {destination}); 'default' sets the fallback",
    )
    logging:     bool = Field(default=True,              description="Log progress while generating")

    @field_validator("path_map")
    @classmethod
    def _check_templates(cls, path_map: dict[str, str]) -> dict[str, str]:
        """Reject templates using placeholders other than {id} and {destination}."""
        for key, template in path_map.items():
            try:
                template.format(id="id", destination="destination")
            except (KeyError, IndexError, ValueError) as e:
                raise ValueError(f"path_map['{key}']: bad template {template!r} ({e!r})") from e
        return path_map


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then TXTVENTURE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    # path_map is a mapping; its env var holds an inline YAML/JSON object.
    if isinstance(data.get("path_map"), str):
        try:
            data["path_map"] = yaml.safe_load(data["path_map"]) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {ENV_PREFIX}PATH_MAP: {e}") from e

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
