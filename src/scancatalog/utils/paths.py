"""Path utility helpers."""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Tuple


def normalise_root(path: Path) -> Path:
    """Return an absolute, user-expanded version of ``path``."""

    return Path(path).expanduser().resolve()


def relative_url_path(root: Path, path: Path) -> str:
    """Return ``path`` relative to ``root`` using forward slashes only."""

    return os.path.relpath(path, root).replace("\\", "/")


def list_directory(directory: Path, sort_entries: bool = True) -> Tuple[List[Path], List[Path]]:
    """Return the ``(subdirectories, files)`` directly inside ``directory``.

    ``OSError`` from the listing propagates to the caller.
    """

    with os.scandir(directory) as it:
        entries = list(it)
    if sort_entries:
        entries.sort(key=lambda e: e.name)

    dirs: List[Path] = []
    files: List[Path] = []
    for entry in entries:
        if entry.is_dir():
            dirs.append(Path(entry.path))
        elif entry.is_file():
            files.append(Path(entry.path))
    return dirs, files
