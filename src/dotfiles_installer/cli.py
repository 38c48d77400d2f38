"""CLI application entry point."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from dotfiles_installer.config.loader import load_settings
from dotfiles_installer.config.schema import InstallerSettings
from dotfiles_installer.core.errors import SourceNotFoundError
from dotfiles_installer.core.installer import install as run_install
from dotfiles_installer.core.registry import SkillRegistry
from dotfiles_installer.utils.output import (
    console,
    print_error,
    print_info,
    print_success,
    setup_logging,
)

app = typer.Typer(
    name="dotfiles-install",
    help="Install Claude configuration and skills into your home directory",
    invoke_without_command=True,
)


def _load_settings_or_exit(config: Optional[Path]) -> InstallerSettings:
    try:
        return load_settings(config)
    except ValidationError as e:
        print_error("Configuration validation failed:")
        console.print(escape(str(e)))
        raise typer.Exit(1)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print_error(f"Failed to load config: {escape(str(e))}")
        raise typer.Exit(1)


def _print_line(line: str) -> None:
    # Printed verbatim on one line: no markup, emoji codes or wrapping.
    console.print(Text(line), soft_wrap=True)


def _print_manifest(config_path: Path, skills) -> None:
    console.print("Installed files:")
    _print_line(f"  - {config_path}")
    for skill in skills:
        _print_line(f"  - {skill.path}/")
    console.print()

    console.print("Claude Code skills:")
    for skill in skills:
        if skill.description is None:
            _print_line(f"  {skill.name}")
        else:
            _print_line(f"  {skill.name:<18} - {skill.description}")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a YAML config file layered over dotfiles.yaml",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
):
    """Install dotfiles. Runs 'install' when no command is given."""
    setup_logging(verbose)
    ctx.obj = {"config": config}
    if ctx.invoked_subcommand is None:
        install(ctx)


@app.command()
def install(ctx: typer.Context):
    """Replace ~/.claude/skills and CLAUDE.md with the repository copies.

    The destination skills directory is deleted and rebuilt on every run,
    so skills removed from the repository disappear from the destination.
    """
    settings = _load_settings_or_exit((ctx.obj or {}).get("config"))

    console.print("Installing dotfiles...")
    console.print()

    try:
        result = run_install(settings, reporter=lambda message: print_info(escape(message)))
    except SourceNotFoundError as e:
        print_error(
            f"{escape(settings.source_dir.name)} directory not found in "
            f"{escape(str(settings.source_dir.parent))}"
        )
        print_info("Please run this script from the dotfiles repository directory.")
        raise typer.Exit(1) from e
    except OSError as e:
        print_error(f"Installation failed: {escape(str(e))}")
        raise typer.Exit(1) from e

    console.print()
    print_success("Installation complete!")
    console.print()
    _print_manifest(result.config_path, result.skills)


@app.command("list")
def list_skills(ctx: typer.Context):
    """List the skills currently installed in the destination."""
    settings = _load_settings_or_exit((ctx.obj or {}).get("config"))

    registry = SkillRegistry(settings.dest_skills_dir, settings.metadata_file)
    skills = registry.list_skills()

    console.print(f"[bold]Target:[/bold] {escape(str(settings.dest_skills_dir))}")
    console.print()

    if not skills:
        print_info("No skills installed")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name", style="green")
    table.add_column("Description")

    for skill in skills:
        table.add_row(Text(skill.name), Text(skill.description or ""))

    console.print(table)


if __name__ == "__main__":
    app()
