"""Human-readable renderings of epoch fields."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from .models import DowntimeRecord

logger = logging.getLogger(__name__)

NICE_DATETIME_FMT = "%Y-%m-%d %H:%M:%S"

TIME_FIELDS: tuple[str, ...] = ("entry_time", "start_time", "end_time")


def format_epoch(epoch: int) -> str:
    """Render Unix epoch seconds in the host's local calendar."""
    return datetime.fromtimestamp(epoch).strftime(NICE_DATETIME_FMT)


def add_nice_dates(records: Iterable[DowntimeRecord]) -> None:
    for record in records:
        for name in TIME_FIELDS:
            raw = record.get(name)
            if raw is None:
                continue
            epoch = record.epoch(name)
            if epoch is None:
                logger.warning(
                    "Leaving %s=%r unconverted for downtime %s",
                    name,
                    raw,
                    record.downtime_id or "(no id)",
                )
                continue
            try:
                nice = format_epoch(epoch)
            except (OverflowError, OSError, ValueError):
                logger.warning("Epoch %s=%d is out of range; leaving it unconverted", name, epoch)
                continue
            record.set_field(f"{name}_nice", nice)


def expires_off_hours(epoch: int, *, workday_start: int = 8, workday_end: int = 18) -> bool:
    """Return True when a downtime ends on a weekend or outside working hours."""
    moment = datetime.fromtimestamp(epoch)
    if moment.weekday() >= 5:
        return True
    return not (workday_start <= moment.hour < workday_end)


def mark_off_hours(
    records: Iterable[DowntimeRecord], *, workday_start: int = 8, workday_end: int = 18
) -> None:
    for record in records:
        epoch = record.end_epoch
        if epoch is None:
            continue
        try:
            off_hours = expires_off_hours(
                epoch, workday_start=workday_start, workday_end=workday_end
            )
        except (OverflowError, OSError, ValueError):
            continue
        record.set_field("expires_off_hours", "yes" if off_hours else "no")
