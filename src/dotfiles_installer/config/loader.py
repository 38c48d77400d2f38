"""Configuration loader with merge logic and precedence handling."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from dotfiles_installer.config.defaults import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG,
    SOURCE_DIR_NAME,
)
from dotfiles_installer.config.schema import InstallerSettings
from dotfiles_installer.utils.paths import project_root

logger = logging.getLogger(__name__)


def find_config_file(root: Optional[Path] = None) -> Optional[Path]:
    """Find the project config file next to the installer.

    Args:
        root: Directory to search, defaults to the project root

    Returns:
        Path to dotfiles.yaml if it exists, otherwise None
    """
    root = root if root is not None else project_root()
    config_file = root / CONFIG_FILENAME
    if config_file.is_file():
        return config_file
    return None


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        file_path: Path to the YAML file

    Returns:
        Dictionary containing the parsed YAML content

    Raises:
        yaml.YAMLError: If the file contains invalid YAML
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is not a mapping
    """
    with open(file_path, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f)
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping at the top of {file_path}")
    return content


def merge_configs(configs: list[dict[str, Any]]) -> dict[str, Any]:
    """Deep merge configuration dictionaries, later ones winning.

    Nested dictionaries merge recursively; any other value (lists
    included) is replaced outright.
    """
    result: dict[str, Any] = {}
    for config in configs:
        result = _deep_merge(result, config)
    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to configuration.

    Supports the following environment variables:
    - DOTFILES_SOURCE_DIR: Override source_dir
    - DOTFILES_DEST_DIR: Override dest_dir
    - DOTFILES_CONFIG_FILE: Override config_file

    Args:
        config: Configuration dictionary to apply overrides to

    Returns:
        Configuration dictionary with environment overrides applied
    """
    result = config.copy()

    if source_dir := os.getenv("DOTFILES_SOURCE_DIR"):
        result["source_dir"] = source_dir

    if dest_dir := os.getenv("DOTFILES_DEST_DIR"):
        result["dest_dir"] = dest_dir

    if config_file := os.getenv("DOTFILES_CONFIG_FILE"):
        result["config_file"] = config_file

    return result


def load_settings(config_path: Optional[Path] = None) -> InstallerSettings:
    """Load and merge installer settings from all sources.

    Precedence (lowest to highest):
    1. Built-in defaults, with source_dir at <project root>/.claude
    2. Project config (<project root>/dotfiles.yaml)
    3. Explicitly provided config_path
    4. Environment variables

    Raises:
        ValidationError: If the merged configuration is invalid
        yaml.YAMLError: If a config file contains invalid YAML
        FileNotFoundError: If config_path is provided but doesn't exist
    """
    root = project_root()
    configs_to_merge = [
        {**DEFAULT_CONFIG, "source_dir": str(root / SOURCE_DIR_NAME)}
    ]

    project_config = find_config_file(root)
    if project_config is not None:
        logger.debug("Loading project config %s", project_config)
        configs_to_merge.append(load_yaml_file(project_config))

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.debug("Loading explicit config %s", config_path)
        configs_to_merge.append(load_yaml_file(config_path))

    merged_config = apply_env_overrides(merge_configs(configs_to_merge))

    return InstallerSettings(**merged_config)
