"""Core installer, skill records and registry."""

from dotfiles_installer.core.errors import DotfilesError, SourceNotFoundError
from dotfiles_installer.core.installer import InstallResult, install
from dotfiles_installer.core.registry import SkillRegistry
from dotfiles_installer.core.skill import InstalledSkill, read_description

__all__ = [
    "DotfilesError",
    "InstallResult",
    "InstalledSkill",
    "SkillRegistry",
    "SourceNotFoundError",
    "install",
    "read_description",
]
