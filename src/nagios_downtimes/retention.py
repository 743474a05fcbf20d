"""Reader for the block-structured Nagios retention file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .models import DowntimeRecord

logger = logging.getLogger(__name__)

DOWNTIME_TAG_MARKER = "downtime"


class RetentionFileError(OSError):
    """Raised when the retention file cannot be opened for reading."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Can't open {path} for reading: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class BlockOpen:
    tag: str


@dataclass(frozen=True, slots=True)
class BodyLine:
    text: str


@dataclass(frozen=True, slots=True)
class BlockClose:
    pass


BlockEvent = Union[BlockOpen, BodyLine, BlockClose]


def iter_block_events(lines: Iterable[str]) -> Iterator[BlockEvent]:
    """Turn raw retention-file lines into block open/body/close events.

    Comment lines never reach the caller. A block still open when a new header
    arrives is closed first; a block still open at end of input is left
    unclosed so the consumer can tell it was truncated.
    """
    inside = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if "{" in line:
            if inside:
                yield BlockClose()
            head = line.split("{", 1)[0].split()
            yield BlockOpen(head[0] if head else "")
            inside = True
            if "}" in line.split("{", 1)[1]:
                yield BlockClose()
                inside = False
        elif "}" in line:
            if inside:
                yield BlockClose()
                inside = False
        elif inside:
            yield BodyLine(line)


class DowntimeRecordBuilder:
    """Accumulates body lines of downtime blocks into records."""

    def __init__(self) -> None:
        self.records: list[DowntimeRecord] = []
        self._current: Optional[DowntimeRecord] = None
        self._skipped_blocks = 0
        self._dropped_blocks = 0

    def open_block(self, tag: str) -> None:
        self._finalize()
        if DOWNTIME_TAG_MARKER not in tag:
            self._skipped_blocks += 1
            return
        self._current = DowntimeRecord(downtime_type=tag)

    def add_line(self, text: str) -> None:
        if self._current is None:
            return
        key, sep, value = text.partition("=")
        if not sep:
            # Bare keys never fill a well-known field.
            logger.debug("Line without '=' in %s block: %r", self._current.downtime_type, text)
            self._current.extra[key.strip()] = ""
            return
        self._current.set_field(key.strip(), value)

    def close_block(self) -> None:
        self._finalize()

    def finish(self) -> list[DowntimeRecord]:
        self._finalize()
        logger.debug(
            "Collected %d downtime records (%d other blocks skipped, %d incomplete dropped)",
            len(self.records),
            self._skipped_blocks,
            self._dropped_blocks,
        )
        return self.records

    def _finalize(self) -> None:
        record, self._current = self._current, None
        if record is None:
            return
        if record.is_complete:
            self.records.append(record)
        else:
            self._dropped_blocks += 1
            logger.debug("Dropping %s block without end_time", record.downtime_type)


def read_downtime_data(lines: Iterable[str]) -> list[DowntimeRecord]:
    """Parse every downtime block that carries an ``end_time``."""
    builder = DowntimeRecordBuilder()
    for event in iter_block_events(lines):
        if isinstance(event, BlockOpen):
            builder.open_block(event.tag)
        elif isinstance(event, BodyLine):
            builder.add_line(event.text)
        else:
            builder.close_block()
    return builder.finish()


def load_downtime_file(path: Path) -> list[DowntimeRecord]:
    """Read all downtime data from the retention file at ``path``."""
    path = Path(path)
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError as exc:
        raise RetentionFileError(path, exc.strerror or str(exc)) from exc

    with handle:
        records = read_downtime_data(handle)
    logger.info("Read %d downtime entries from %s", len(records), path)
    return records
