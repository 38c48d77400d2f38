"""Helpers for building source trees in tests."""

from pathlib import Path


def write_skill(skills_dir: Path, name: str, description=None, extra_files=None) -> Path:
    """Create a skill directory with a SKILL.md and optional extra files."""
    skill_dir = skills_dir / name
    skill_dir.mkdir(parents=True)

    lines = ["---", f"name: {name}"]
    if description is not None:
        lines.append(f"description: {description}")
    lines += ["---", "", f"# {name}", ""]
    (skill_dir / "SKILL.md").write_text("\n".join(lines))

    for rel_path, content in (extra_files or {}).items():
        path = skill_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)

    return skill_dir


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under root (relative path) to its bytes."""
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
