"""Filesystem walking for building the scan catalogue."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from .resolver import resolve_scan
from .schema import Scan
from .store import index_by_path, load_catalog, write_catalog
from .utils.logging import get_logger
from .utils.paths import list_directory, normalise_root


LOGGER = get_logger(__name__)
MODEL_EXTENSION = ".obj"


@dataclass(slots=True)
class ScanConfig:
    """Configuration parameters controlling scan behaviour."""

    root: Path
    base_url: str = ""
    models_dir: str = "Models"
    catalog_name: str = "index.json"
    sort_entries: bool = True
    texture_case_sensitive: bool = False

    def __post_init__(self) -> None:
        self.root = normalise_root(self.root)

    @property
    def models_path(self) -> Path:
        return self.root / self.models_dir

    @property
    def catalog_path(self) -> Path:
        return self.root / self.catalog_name


class CatalogScanner:
    """Walk the models tree and resolve one scan per model file."""

    def __init__(self, config: ScanConfig) -> None:
        self.config = config

    def _is_model(self, path: Path) -> bool:
        return path.suffix.lower() == MODEL_EXTENSION

    def scan_directory(self, directory: Path, existing: Mapping[str, Scan]) -> List[Scan]:
        """Return scans for ``directory``; subdirectories come before its own models."""

        subdirs, files = list_directory(directory, self.config.sort_entries)
        scans: List[Scan] = []
        for subdir in subdirs:
            scans.extend(self.scan_directory(subdir, existing))
        for path in files:
            if self._is_model(path):
                scans.append(resolve_scan(directory, path, existing, self.config))
        return scans

    def scan(self, existing: Iterable[Scan] = ()) -> List[Scan]:
        models = self.config.models_path
        if not models.is_dir():
            raise FileNotFoundError(f"Models directory {models} does not exist")
        return self.scan_directory(models, index_by_path(existing))


def build_catalog(config: ScanConfig, existing: Optional[List[Scan]] = None) -> List[Scan]:
    """Load the previous catalogue, rescan the tree and overwrite the catalogue file."""

    if existing is None:
        existing = load_catalog(config.catalog_path)
    known = index_by_path(existing)
    scans = CatalogScanner(config).scan(existing)
    merged = sum(1 for scan in scans if scan.path in known)
    LOGGER.info("Resolved %d scans (%d merged, %d new)", len(scans), merged, len(scans) - merged)
    write_catalog(config.catalog_path, scans)
    return scans
