from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


ScanDirFactory = Callable[..., Path]


@pytest.fixture
def make_scan_dir(tmp_path: Path) -> ScanDirFactory:
    """Create ``<tmp>/Models/<relative>`` holding a model and the given texture files."""

    def _make(relative: str, textures: Iterable[str] = (), model: str = "model.obj") -> Path:
        directory = tmp_path / "Models" / relative
        directory.mkdir(parents=True, exist_ok=True)
        if model:
            (directory / model).write_text("v 0 0 0\n")
        for name in textures:
            (directory / name).write_bytes(b"\x89")
        return directory

    return _make
