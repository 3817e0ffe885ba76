"""Environment helper utilities.

Loads a `.env` file from the project root so that ``INVENTORY_*`` settings
defined there become available via ``os.getenv`` (see ``config.config``).
Uses `python-dotenv`, declared in `pyproject.toml` dependencies.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

__all__ = ["load_project_dotenv"]


def _find_project_root(start: Path | None = None) -> Path:
    """Traverse upwards until we find a directory that contains `pyproject.toml`."""
    current = start or Path(__file__).resolve().parent
    for _ in range(10):  # safety break
        if (current / "pyproject.toml").exists():
            return current
        if current.parent == current:
            break
        current = current.parent
    return Path(__file__).resolve().parent


def load_project_dotenv(filename: str = ".env") -> bool:
    """Load variables from the project-level env file; return whether one was found."""
    dotenv_path = _find_project_root() / filename
    if not dotenv_path.exists():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return True
