"""Shared pytest fixtures for dotfiles installer tests."""

import pytest

from dotfiles_installer.config.schema import InstallerSettings

from helpers import write_skill


@pytest.fixture
def source_dir(tmp_path):
    """Provide a source tree with a config file and two skills."""
    source = tmp_path.resolve() / "repo" / ".claude"
    source.mkdir(parents=True)
    (source / "CLAUDE.md").write_text("# Global instructions\n")

    skills = source / "skills"
    write_skill(skills, "alpha", "Does alpha things")
    write_skill(
        skills,
        "beta",
        "Does beta things",
        extra_files={"references/guide.md": "guide", "scripts/run.sh": "echo hi\n"},
    )
    return source


@pytest.fixture
def dest_dir(tmp_path):
    """Provide the destination root (not created)."""
    return tmp_path.resolve() / "home" / ".claude"


@pytest.fixture
def settings(source_dir, dest_dir):
    """Provide settings pointing at the temporary source and destination."""
    return InstallerSettings(source_dir=source_dir, dest_dir=dest_dir)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch, source_dir, dest_dir):
    """Point the installer at temporary directories through the environment."""
    home_dir = dest_dir.parent
    home_dir.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("DOTFILES_SOURCE_DIR", str(source_dir))
    monkeypatch.setenv("DOTFILES_DEST_DIR", str(dest_dir))
    monkeypatch.delenv("DOTFILES_CONFIG_FILE", raising=False)
    return {"home_dir": home_dir, "source_dir": source_dir, "dest_dir": dest_dir}
