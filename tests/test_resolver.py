from __future__ import annotations

from pathlib import Path

import pytest

from scancatalog.resolver import (
    build_public_path,
    detect_version,
    extract_date,
    find_textures,
    resolve_scan,
)
from scancatalog.scanner import ScanConfig
from scancatalog.schema import Scan

BASE = "https://example.org/scans/"


@pytest.mark.parametrize(
    ("folder", "expected"),
    [
        ("ScanA_20240115_093000", "20240115_093000"),
        ("20240131_153045", "20240131_153045"),
        ("x20240101_000000_20250101_111111", "20240101_000000"),
        ("Statue 20230405_121212 outdoor", "20230405_121212"),
        ("Scan_2024011_093000", ""),
        ("plain-folder", ""),
        ("", ""),
    ],
)
def test_extract_date(folder: str, expected: str) -> None:
    assert extract_date(folder) == expected


@pytest.mark.parametrize("count", [0, 1, 2, 3, 5, 6])
def test_incomplete_texture_set_is_version_one(count: int) -> None:
    textures = [f"/t/{i}.jpg" for i in range(count)]
    assert detect_version(textures) == ("1", [])


def test_full_texture_set_is_version_two() -> None:
    textures = ["/t/a.jpg", "/t/b.jpg", "/t/c.png", "/t/d.png"]
    assert detect_version(textures) == ("2", textures)


def test_find_textures_lists_jpg_before_png(make_scan_dir) -> None:
    directory = make_scan_dir("A", ["a.png", "b.jpg", "c.png", "d.jpg", "notes.txt"])
    names = [Path(p).name for p in find_textures(directory)]
    assert names == ["b.jpg", "d.jpg", "a.png", "c.png"]


def test_find_textures_case_sensitivity(make_scan_dir) -> None:
    directory = make_scan_dir("A", ["a.JPG", "b.jpg", "c.Png"])
    assert len(find_textures(directory)) == 3
    assert [Path(p).name for p in find_textures(directory, case_sensitive=True)] == ["b.jpg"]


def test_build_public_path_uses_forward_slashes(tmp_path: Path) -> None:
    model = tmp_path / "Models" / "A" / "scan.obj"
    assert build_public_path(tmp_path, model, BASE) == BASE + "Models/A/scan.obj"


def test_resolve_example_scan(tmp_path: Path, make_scan_dir) -> None:
    directory = make_scan_dir("ScanA_20240115_093000", ["t1.jpg", "t2.jpg", "t3.png", "t4.png"])
    config = ScanConfig(root=tmp_path, base_url=BASE)
    scan_dir = config.models_path / directory.name

    scan = resolve_scan(scan_dir, scan_dir / "model.obj", {}, config)

    assert scan.name == "ScanA_20240115_093000"
    assert scan.date == "20240115_093000"
    assert scan.version == "2"
    assert scan.description == ""
    assert scan.path == BASE + "Models/ScanA_20240115_093000/model.obj"
    assert scan.textures == [str(scan_dir / name) for name in ("t1.jpg", "t2.jpg", "t3.png", "t4.png")]
    assert all(Path(texture).is_absolute() for texture in scan.textures)


def test_resolve_merges_with_prior_record(tmp_path: Path, make_scan_dir) -> None:
    directory = make_scan_dir("Bust", ["a.jpg"])
    config = ScanConfig(root=tmp_path, base_url=BASE)
    scan_dir = config.models_path / directory.name
    path = BASE + "Models/Bust/model.obj"
    prior = Scan(
        name="old",
        description="Marble bust",
        date="20000101_000000",
        version="2",
        path=path,
        textures=["x", "y", "z", "w"],
        license="CC0",
    )

    scan = resolve_scan(scan_dir, scan_dir / "model.obj", {path: prior}, config)

    assert scan.description == "Marble bust"
    assert scan.name == "Bust"
    assert scan.date == ""
    assert scan.version == "1"
    assert scan.textures == []
    assert scan.model_extra == {"license": "CC0"}
    assert prior.name == "old"
