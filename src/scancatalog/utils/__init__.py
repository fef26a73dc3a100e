"""Utility helpers shared across the scan-catalog codebase."""

from .logging import configure_logging, get_logger
from .paths import list_directory, normalise_root, relative_url_path

__all__ = [
    "configure_logging",
    "get_logger",
    "list_directory",
    "normalise_root",
    "relative_url_path",
]
