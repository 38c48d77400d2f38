"""Read-only view of an installed skills directory."""

from pathlib import Path
from typing import Optional

from dotfiles_installer.core.skill import InstalledSkill


class SkillRegistry:
    """Lists the skills installed under a skills directory.

    There is no manifest file: the directory itself is the source of
    truth, so every call reflects what is on disk right now.
    """

    def __init__(self, skills_dir: Path, metadata_file: str = "SKILL.md"):
        """Initialize the registry for a skills directory.

        Args:
            skills_dir: Directory holding one subdirectory per skill
            metadata_file: Name of the per-skill metadata file
        """
        self.skills_dir = Path(skills_dir)
        self.metadata_file = metadata_file

    def list_skills(self) -> list[InstalledSkill]:
        """Get all installed skills, sorted by name.

        Returns:
            A list of skills, empty if the directory does not exist
        """
        if not self.skills_dir.is_dir():
            return []

        return [
            InstalledSkill.from_directory(entry, self.metadata_file)
            for entry in sorted(self.skills_dir.iterdir(), key=lambda p: p.name)
            if entry.is_dir()
        ]

    def get_skill(self, name: str) -> Optional[InstalledSkill]:
        """Get a single installed skill by name.

        Args:
            name: The name of the skill to retrieve

        Returns:
            The skill, or None if not installed
        """
        path = self.skills_dir / name
        if not path.is_dir():
            return None
        return InstalledSkill.from_directory(path, self.metadata_file)

    def has_skill(self, name: str) -> bool:
        """Check if a skill is installed."""
        return (self.skills_dir / name).is_dir()
