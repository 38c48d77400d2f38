"""Configuration loading and management."""

from dotfiles_installer.config.loader import (
    apply_env_overrides,
    find_config_file,
    load_settings,
    merge_configs,
)
from dotfiles_installer.config.schema import InstallerSettings

__all__ = [
    # Loader functions
    "apply_env_overrides",
    "find_config_file",
    "load_settings",
    "merge_configs",
    # Schema classes
    "InstallerSettings",
]
