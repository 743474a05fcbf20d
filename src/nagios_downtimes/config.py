"""Configuration models for the downtime report."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .paths import DEFAULT_RETENTION_PATH, resolve_retention_path

OUTPUT_FORMATS: tuple[str, ...] = ("table", "tsv")

OFF_HOURS_COLUMN: tuple[str, str] = ("expires_off_hours", "off_hours")


@dataclass(slots=True)
class ReportSettings:
    """Runtime configuration for reading and printing downtime."""

    retention_path: Path = DEFAULT_RETENTION_PATH
    output_format: str = "table"
    flag_off_hours: bool = False
    workday_start: int = 8
    workday_end: int = 18
    extra_columns: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_options(
        cls,
        retention_file: Path | None,
        output_format: str = "table",
        flag_off_hours: bool = False,
        workday_start: int = 8,
        workday_end: int = 18,
    ) -> "ReportSettings":
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output format should be one of {', '.join(OUTPUT_FORMATS)}; got {output_format!r}"
            )
        if not 0 <= workday_start < workday_end <= 24:
            raise ValueError(
                f"working hours must satisfy 0 <= start < end <= 24; got {workday_start}-{workday_end}"
            )
        return cls(
            retention_path=resolve_retention_path(retention_file),
            output_format=output_format,
            flag_off_hours=flag_off_hours,
            workday_start=workday_start,
            workday_end=workday_end,
            extra_columns=(OFF_HOURS_COLUMN,) if flag_off_hours else (),
        )
