"""Configuration helpers for scan-catalog."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

import yaml
from pydantic import BaseModel, Field

if TYPE_CHECKING:  # pragma: no cover
    from ..scanner import ScanConfig


class AppConfig(BaseModel):
    """Application level configuration."""

    root: Path = Field(default=Path("."))
    models_dir: str = "Models"
    catalog_name: str = "index.json"
    base_url: str = ""
    sort_entries: bool = True
    texture_case_sensitive: bool = False
    log_level: str = "INFO"

    def scan_config(self) -> "ScanConfig":
        from ..scanner import ScanConfig

        return ScanConfig(
            root=self.root,
            base_url=self.base_url,
            models_dir=self.models_dir,
            catalog_name=self.catalog_name,
            sort_entries=self.sort_entries,
            texture_case_sensitive=self.texture_case_sensitive,
        )


def load_config(path: Path) -> AppConfig:
    """Load configuration from a YAML file."""

    data: Dict[str, Any] = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)
