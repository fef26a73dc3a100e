"""Build a JSON catalogue of 3D scan assets from a directory tree."""

from .resolver import extract_date, resolve_scan
from .scanner import CatalogScanner, ScanConfig, build_catalog
from .schema import CatalogSummary, Scan
from .store import load_catalog, write_catalog

__all__ = [
    "CatalogScanner",
    "CatalogSummary",
    "Scan",
    "ScanConfig",
    "build_catalog",
    "extract_date",
    "load_catalog",
    "resolve_scan",
    "write_catalog",
]
