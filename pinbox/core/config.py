"""
Configuration management for Pinbox.

Handles pinbox.yaml parsing and the IMAGE_URI environment override.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from pinbox.core.dockerfile import BuildEnvironment
from pinbox.core.errors import ConfigError


# Defaults
DEFAULT_IMAGE_URI = "docker.io/vadorovsky/pinocchio"
MOUNT_TARGET = "/src"
CONFIG_FILE_NAME = "pinbox.yaml"
IMAGE_URI_ENV = "IMAGE_URI"


class PinboxConfig(BaseModel):
    """Complete Pinbox configuration (pinbox.yaml schema)."""

    image_uri: str = Field(default=DEFAULT_IMAGE_URI, description="Image tag to build and run")
    build_context: str = Field(default=".", description="Build context passed to the engine")
    mount_target: str = Field(default=MOUNT_TARGET, description="Where the current directory is mounted")
    build: BuildEnvironment = Field(default_factory=BuildEnvironment)


def get_config_path(base_path: Optional[Path] = None) -> Path:
    """Get the pinbox.yaml config file path."""
    if base_path is None:
        base_path = Path.cwd()
    return base_path / CONFIG_FILE_NAME


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> PinboxConfig:
    """
    Load configuration.

    Defaults are overlaid with pinbox.yaml (when present) and then with
    IMAGE_URI from the environment. An empty IMAGE_URI counts as unset.
    """
    if config_path is None:
        config_path = get_config_path()
    if environ is None:
        environ = os.environ

    data = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not parse {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Could not read {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path} must contain a mapping")

    image_uri = environ.get(IMAGE_URI_ENV)
    if image_uri:
        data = {**data, "image_uri": image_uri}

    try:
        return PinboxConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e


def save_config(config: PinboxConfig, config_path: Optional[Path] = None) -> Path:
    """Save configuration to pinbox.yaml."""
    if config_path is None:
        config_path = get_config_path()

    data = config.model_dump(exclude_none=True)

    with open(config_path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    return config_path
