"""Path utilities for expanding and normalizing filesystem paths."""

from pathlib import Path


def expand_path(path: str) -> Path:
    """Expand and normalize a path, resolving ~ and relative paths.

    Args:
        path: Path string that may contain ~ or be relative

    Returns:
        Absolute Path object
    """
    return Path(path).expanduser().resolve()


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The path that was ensured
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def project_root() -> Path:
    """Return the checkout the installer lives in.

    Resolved from this file's location (src/dotfiles_installer/utils/),
    so the result does not depend on the caller's working directory.
    """
    return Path(__file__).resolve().parents[3]
