"""Path resolution helpers for config-driven paths."""

from __future__ import annotations

from pathlib import Path


def is_absolute_like(path: str) -> bool:
    return Path(path).is_absolute() or path.startswith("~")


def resolve_path(base_dir: Path, path: str) -> Path:
    if is_absolute_like(path):
        return Path(path).expanduser().resolve()
    return (base_dir / path).resolve()


def resolve_config_path(config_file_path: Path, path: str) -> Path:
    """Resolve ``path`` relative to the directory holding the config file."""
    return resolve_path(config_file_path.resolve().parent, path)
