"""Settings for the snippet CLI.

Precedence (highest wins): CLI options, environment variables, config file,
defaults. The config file is YAML::

    languages: [javascript]
    output_dir: docs/snippets
    max_workers: 8
    check: true
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from api_snippet_gen.errors import ConfigError

ENV_LANGUAGES = "API_SNIPPET_GEN_LANGUAGES"
ENV_OUTPUT_DIR = "API_SNIPPET_GEN_OUTPUT_DIR"


class Settings(BaseModel):
    languages: list[str] = Field(default_factory=lambda: ["javascript"], min_length=1)
    output_dir: Path = Path("snippets")
    max_workers: int = Field(default=4, ge=1)
    check: bool = False


def load_settings(config_path: Path | None = None) -> Settings:
    """Build settings from an optional YAML file plus environment overrides."""
    data: dict = {}
    if config_path is not None:
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load config {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {config_path} must contain a mapping")

    if os.getenv(ENV_LANGUAGES):
        data["languages"] = [lang.strip() for lang in os.environ[ENV_LANGUAGES].split(",") if lang.strip()]
    if os.getenv(ENV_OUTPUT_DIR):
        data["output_dir"] = os.environ[ENV_OUTPUT_DIR]

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings:\n{e}") from e
