"""Metadata inference for a single model file and merging with prior scans."""
from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, List, Mapping, Sequence, Tuple

from .schema import Scan, ScanVersion
from .utils.logging import get_logger
from .utils.paths import list_directory, relative_url_path

if TYPE_CHECKING:  # pragma: no cover
    from .scanner import ScanConfig


LOGGER = get_logger(__name__)

DATE_PATTERN = re.compile(r"\d{8}_\d{6}")
TEXTURE_EXTENSIONS = (".jpg", ".png")
TEXTURE_SET_SIZE = 4


def extract_date(folder_name: str) -> str:
    """Return the first ``YYYYMMDD_HHMMSS`` stamp in ``folder_name`` or ``""``."""

    match = DATE_PATTERN.search(folder_name)
    return match.group(0) if match else ""


def find_textures(directory: Path, case_sensitive: bool = False, sort_entries: bool = True) -> List[str]:
    """Return texture image paths in ``directory``, ``.jpg`` files before ``.png`` files."""

    _, files = list_directory(directory, sort_entries)
    textures: List[str] = []
    for ext in TEXTURE_EXTENSIONS:
        for path in files:
            suffix = path.suffix if case_sensitive else path.suffix.lower()
            if suffix == ext:
                textures.append(str(path))
    return textures


def detect_version(textures: Sequence[str]) -> Tuple[ScanVersion, List[str]]:
    """A full texture set marks a version 2 scan; anything else is version 1."""

    if len(textures) == TEXTURE_SET_SIZE:
        return "2", list(textures)
    return "1", []


def build_public_path(root: Path, model_path: Path, base_url: str) -> str:
    return f"{base_url}{relative_url_path(root, model_path)}"


def resolve_scan(
    directory: Path,
    model_path: Path,
    existing: Mapping[str, Scan],
    config: "ScanConfig",
) -> Scan:
    """Build the catalogue record for ``model_path``.

    When ``existing`` already holds a scan with the same public path, a copy of it
    is returned with the recomputed fields replaced; every other field is kept.
    """

    name = directory.name
    date = extract_date(name)
    version, textures = detect_version(
        find_textures(directory, config.texture_case_sensitive, config.sort_entries)
    )
    path = build_public_path(config.root, model_path, config.base_url)

    prior = existing.get(path)
    if prior is not None:
        LOGGER.debug("Updating existing scan %s", path)
        return prior.model_copy(
            update={
                "name": name,
                "date": date,
                "version": version,
                "textures": textures,
                "path": path,
            }
        )

    LOGGER.debug("Adding new scan %s", path)
    return Scan(name=name, date=date, version=version, path=path, textures=textures)
