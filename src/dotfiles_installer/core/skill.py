"""Installed skill records and metadata parsing."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DESCRIPTION_PREFIX = "description:"


def read_description(metadata_path: Path) -> Optional[str]:
    """Return the description from a skill metadata file.

    Only the first line starting with ``description:`` counts. Leading
    whitespace after the prefix is dropped; the rest of the line is kept
    as-is. This is a line scan, not a YAML parse, so frontmatter is
    optional.

    Args:
        metadata_path: Path to the skill's SKILL.md

    Returns:
        The description text, or None if the file is missing or has no
        description line
    """
    if not metadata_path.is_file():
        return None

    with open(metadata_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            if line.startswith(DESCRIPTION_PREFIX):
                return line[len(DESCRIPTION_PREFIX):].rstrip("\r\n").lstrip()

    return None


@dataclass
class InstalledSkill:
    """A skill directory present in the destination."""

    name: str
    path: Path
    description: Optional[str] = None

    @classmethod
    def from_directory(cls, path: Path, metadata_file: str = "SKILL.md") -> "InstalledSkill":
        """Create a skill record from an installed skill directory."""
        return cls(
            name=path.name,
            path=path,
            description=read_description(path / metadata_file),
        )
