"""Table rendering for downtime reports."""

from __future__ import annotations

import io
import sys
from typing import Iterable, Optional, Sequence, TextIO

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import ReportSettings
from .models import DowntimeRecord

Column = tuple[str, str]

OUTPUT_COLUMNS: tuple[Column, ...] = (
    ("downtime_id", "id"),
    ("end_time_nice", "end_time"),
    ("is_in_effect", "in_effect"),
    ("downtime_type", "type"),
    ("host_name", "host"),
    ("service_description", "description"),
    ("author", "user"),
)


class DowntimeReport:
    """Print downtime records in the configured layout."""

    def __init__(self, settings: ReportSettings, stream: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.stream = stream

    @property
    def columns(self) -> tuple[Column, ...]:
        return OUTPUT_COLUMNS + tuple(self.settings.extra_columns)

    def render(self, records: Iterable[DowntimeRecord]) -> str:
        ordered = sort_by_end_time(records)
        if self.settings.output_format == "tsv":
            return render_tab_delimited(ordered, self.columns)
        return render_ascii_table(ordered, self.columns)

    def print_report(self, records: Iterable[DowntimeRecord]) -> None:
        stream = self.stream or sys.stdout
        stream.write(self.render(records))
        stream.flush()


def sort_by_end_time(records: Iterable[DowntimeRecord]) -> list[DowntimeRecord]:
    """Order by numeric end_time; unparseable end times go last."""

    def key(record: DowntimeRecord) -> tuple[int, int]:
        epoch = record.end_epoch
        return (1, 0) if epoch is None else (0, epoch)

    return sorted(records, key=key)


def project_rows(records: Iterable[DowntimeRecord], columns: Sequence[Column]) -> list[list[str]]:
    rows = []
    for record in records:
        data = record.as_dict()
        rows.append([data.get(name, "").replace("\t", " ") for name, _alias in columns])
    return rows


def render_tab_delimited(records: Iterable[DowntimeRecord], columns: Sequence[Column]) -> str:
    lines = ["\t".join(alias for _name, alias in columns)]
    lines.extend("\t".join(row) for row in project_rows(records, columns))
    return "\n".join(lines) + "\n"


def render_ascii_table(records: Iterable[DowntimeRecord], columns: Sequence[Column]) -> str:
    rows = project_rows(records, columns)
    table = Table(box=box.ASCII, show_lines=False, expand=False)
    for _name, alias in columns:
        table.add_column(Text(alias), no_wrap=True, overflow="ignore")
    for row in rows:
        table.add_row(*(Text(value) for value in row))

    widths = [cell_len(alias) for _name, alias in columns]
    for row in rows:
        widths = [max(width, cell_len(value)) for width, value in zip(widths, row)]
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=sum(widths) + 3 * len(widths) + 1,
        color_system=None,
        emoji=False,
        highlight=False,
    )
    console.print(table)
    return buffer.getvalue()
