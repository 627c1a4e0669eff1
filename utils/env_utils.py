"""Load .env files into the process environment."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parent.parent


def env_file_candidates() -> list[Path]:
    """Return .env locations in load order (cwd, repo, home)."""
    return [
        Path.cwd() / ".env",
        _REPO_ROOT / ".env",
        Path.home() / ".config-store.env",
    ]


def load_env_files() -> list[Path]:
    """Load every existing candidate without overriding variables already set.

    Returns the files that were loaded.
    """
    loaded: list[Path] = []
    for path in env_file_candidates():
        if path.exists():
            load_dotenv(dotenv_path=str(path), override=False)
            loaded.append(path)
    return loaded
