"""Synchronize the source configuration tree into the destination."""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from dotfiles_installer.config.schema import InstallerSettings
from dotfiles_installer.core.errors import SourceNotFoundError
from dotfiles_installer.core.registry import SkillRegistry
from dotfiles_installer.core.skill import InstalledSkill
from dotfiles_installer.utils.paths import ensure_dir

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


@dataclass
class InstallResult:
    """What a completed run left in the destination."""

    config_path: Path
    skills_dir: Path
    skills: list[InstalledSkill] = field(default_factory=list)


def _noop(message: str) -> None:
    pass


def find_source_skills(skills_dir: Path) -> list[Path]:
    """Return the immediate subdirectories of a skills collection.

    Regular files are ignored and a missing collection yields no skills.
    """
    if not skills_dir.is_dir():
        return []
    return sorted(
        (entry for entry in skills_dir.iterdir() if entry.is_dir()),
        key=lambda p: p.name,
    )


def reset_dir(path: Path) -> Path:
    """Delete a directory tree if present and recreate it empty."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.exists():
        shutil.rmtree(path)
    return ensure_dir(path)


def install(
    settings: InstallerSettings,
    reporter: Optional[Reporter] = None,
) -> InstallResult:
    """Replace the destination tree with the source tree.

    One sequential pass: validate the source, wipe and recreate the
    destination skills directory, copy the config file, copy every skill
    directory, then enumerate what was installed. Nothing is rolled back
    if a step fails; the first OSError propagates and the destination is
    left as it was at that moment.

    Args:
        settings: Source and destination locations
        reporter: Called with a short message before each step

    Returns:
        The installed config path and skills

    Raises:
        SourceNotFoundError: If the source root is missing. Raised before
            anything in the destination is touched.
        OSError: On any filesystem failure while copying
    """
    report = reporter or _noop

    if not settings.source_dir.is_dir():
        raise SourceNotFoundError(settings.source_dir)

    report("Cleaning existing configurations...")
    logger.debug("Resetting %s", settings.dest_skills_dir)
    reset_dir(settings.dest_skills_dir)

    report(f"Installing {settings.config_file}...")
    logger.debug(
        "Copying %s -> %s", settings.source_config_path, settings.dest_config_path
    )
    shutil.copy2(settings.source_config_path, settings.dest_config_path)

    report("Installing skills...")
    for skill_dir in find_source_skills(settings.source_skills_dir):
        report(f"Installing skill: {skill_dir.name}")
        dest = settings.dest_skills_dir / skill_dir.name
        logger.debug("Copying %s -> %s", skill_dir, dest)
        shutil.copytree(skill_dir, dest, symlinks=True)

    registry = SkillRegistry(settings.dest_skills_dir, settings.metadata_file)
    skills = registry.list_skills()
    logger.debug("Installed %d skill(s)", len(skills))

    return InstallResult(
        config_path=settings.dest_config_path,
        skills_dir=settings.dest_skills_dir,
        skills=skills,
    )
