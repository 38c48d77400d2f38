"""Built-in default configuration for the dotfiles installer."""

# Base layer for every other config source; source_dir is filled in at load
# time from the project root.
DEFAULT_CONFIG = {
    "dest_dir": "~/.claude",
    "config_file": "CLAUDE.md",
    "skills_dir_name": "skills",
    "metadata_file": "SKILL.md",
}

SOURCE_DIR_NAME = ".claude"

CONFIG_FILENAME = "dotfiles.yaml"
