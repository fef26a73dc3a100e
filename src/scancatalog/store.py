"""Reading and writing the JSON catalogue file."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List

from pydantic import ValidationError

from .schema import Scan
from .utils.logging import get_logger


LOGGER = get_logger(__name__)


def load_catalog(path: Path) -> List[Scan]:
    """Return the scans stored at ``path``, or an empty list.

    A missing, unreadable or malformed catalogue is treated as an empty one;
    the failure is logged and never raised. Individual records without a usable
    ``path`` are skipped with a warning while their siblings are kept.
    """

    if not path.exists():
        LOGGER.debug("No existing catalogue at %s", path)
        return []
    try:
        content = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        LOGGER.warning("Failed to load existing catalogue %s: %s", path, exc)
        return []
    if content is None:
        content = []
    if not isinstance(content, list):
        LOGGER.warning("Ignoring existing catalogue %s: expected a JSON array", path)
        return []

    scans: List[Scan] = []
    for position, record in enumerate(content):
        if not isinstance(record, dict) or not isinstance(record.get("path"), str):
            LOGGER.warning("Skipping catalogue record %d in %s: no usable path", position, path)
            continue
        try:
            scans.append(Scan.model_validate(record))
        except ValidationError as exc:
            LOGGER.warning("Skipping catalogue record %d in %s: %s", position, path, exc)
    LOGGER.info("Loaded %d existing scans from %s", len(scans), path)
    return scans


def index_by_path(scans: Iterable[Scan]) -> Dict[str, Scan]:
    """Map each scan's ``path`` to the first scan carrying it."""

    index: Dict[str, Scan] = {}
    for scan in scans:
        index.setdefault(scan.path, scan)
    return index


def write_catalog(path: Path, scans: Iterable[Scan]) -> None:
    """Overwrite ``path`` with ``scans`` as an indented JSON array.

    The write is not atomic; an interrupted run can leave a truncated file.
    """

    records = [scan.as_record() for scan in scans]
    path.write_text(json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    LOGGER.info("Wrote %d scans to %s", len(records), path)
