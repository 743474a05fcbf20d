"""Domain models for scheduled downtime."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

WELL_KNOWN_FIELDS: tuple[str, ...] = (
    "downtime_id",
    "entry_time",
    "start_time",
    "end_time",
    "is_in_effect",
    "host_name",
    "service_description",
    "author",
)

NICE_FIELDS: tuple[str, ...] = ("entry_time_nice", "start_time_nice", "end_time_nice")

_ATTRIBUTE_FIELDS = frozenset(("downtime_type",) + WELL_KNOWN_FIELDS + NICE_FIELDS)


@dataclass(slots=True)
class DowntimeRecord:
    """One downtime block read from a retention file.

    Values are kept exactly as they appear in the file. Keys that are not
    well-known land in ``extra`` so nothing in the block is lost.
    """

    downtime_type: str
    downtime_id: Optional[str] = None
    entry_time: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    is_in_effect: Optional[str] = None
    host_name: Optional[str] = None
    service_description: Optional[str] = None
    author: Optional[str] = None
    entry_time_nice: Optional[str] = None
    start_time_nice: Optional[str] = None
    end_time_nice: Optional[str] = None
    extra: dict[str, str] = field(default_factory=dict)

    def set_field(self, key: str, value: str) -> None:
        if key in _ATTRIBUTE_FIELDS:
            setattr(self, key, value)
        else:
            self.extra[key] = value

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        if name in _ATTRIBUTE_FIELDS:
            value = getattr(self, name)
            return default if value is None else value
        return self.extra.get(name, default)

    def as_dict(self) -> dict[str, str]:
        """Return every defined field keyed by its retention-file name."""
        data: dict[str, str] = {"downtime_type": self.downtime_type}
        for name in WELL_KNOWN_FIELDS + NICE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    def epoch(self, name: str) -> Optional[int]:
        value = self.get(name)
        if value is None:
            return None
        try:
            return int(value.strip())
        except ValueError:
            return None

    @property
    def end_epoch(self) -> Optional[int]:
        return self.epoch("end_time")

    @property
    def is_complete(self) -> bool:
        return self.end_time is not None
