"""Pydantic models describing the on-disk scan catalogue."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


ScanVersion = Literal["1", "2"]


class Scan(BaseModel):
    """A single catalogued scan, keyed by its public ``path``.

    Unknown keys read from an existing catalogue are kept as extras so that
    hand-maintained fields survive a rebuild. Text fields are read leniently:
    ``null`` becomes the field default and numbers become strings. Freshly
    resolved scans only ever carry ``"1"`` or ``"2"`` as ``version``.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = ""
    description: str = ""
    date: str = ""
    version: str = "1"
    path: str
    textures: List[str] = Field(default_factory=list)

    @field_validator("name", "description", "date", "version", mode="before")
    @classmethod
    def coerce_text(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("textures", mode="before")
    @classmethod
    def coerce_textures(cls, value: Any) -> Any:
        return [] if value is None else value

    def as_record(self) -> Dict[str, Any]:
        """Return a JSON-serialisable mapping representing this scan."""

        return self.model_dump()


class CatalogSummary(BaseModel):
    """Aggregate summary information of a catalogue."""

    total_entries: int
    versions: Dict[str, int]
    dated_entries: int
    textured_entries: int

    @classmethod
    def from_entries(cls, entries: Iterable[Scan]) -> "CatalogSummary":
        entries_list = list(entries)
        counts: Dict[str, int] = {}
        for entry in entries_list:
            counts[entry.version] = counts.get(entry.version, 0) + 1
        return cls(
            total_entries=len(entries_list),
            versions=counts,
            dated_entries=sum(1 for entry in entries_list if entry.date),
            textured_entries=sum(1 for entry in entries_list if entry.textures),
        )
