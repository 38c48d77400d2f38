"""Pydantic models for installer configuration."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from dotfiles_installer.utils.paths import expand_path


class InstallerSettings(BaseModel):
    """Where dotfiles come from and where they are installed."""

    source_dir: Path = Field(
        description="Source configuration tree shipped with the installer"
    )
    dest_dir: Path = Field(
        default=Path("~/.claude"),
        validate_default=True,
        description="Destination root under the user's home directory",
    )
    config_file: str = Field(
        default="CLAUDE.md",
        description="Single file copied from source_dir to dest_dir",
    )
    skills_dir_name: str = Field(
        default="skills",
        description="Name of the skills collection under both roots",
    )
    metadata_file: str = Field(
        default="SKILL.md",
        description="Per-skill file carrying the description line",
    )

    @field_validator("source_dir", "dest_dir", mode="before")
    @classmethod
    def expand_dirs(cls, v):
        """Expand ~ and make directory paths absolute."""
        if isinstance(v, (str, Path)):
            return expand_path(str(v))
        return v

    @field_validator("config_file", "skills_dir_name", "metadata_file")
    @classmethod
    def validate_bare_name(cls, v: str) -> str:
        """Validate that the value names an entry, not a path."""
        if not v or v in (".", "..") or "/" in v or "\\" in v:
            raise ValueError(f"Must be a plain file or directory name: {v!r}")
        return v

    @property
    def source_skills_dir(self) -> Path:
        return self.source_dir / self.skills_dir_name

    @property
    def dest_skills_dir(self) -> Path:
        return self.dest_dir / self.skills_dir_name

    @property
    def source_config_path(self) -> Path:
        return self.source_dir / self.config_file

    @property
    def dest_config_path(self) -> Path:
        return self.dest_dir / self.config_file
