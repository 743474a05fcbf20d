"""Helpers for locating the retention file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

DEFAULT_RETENTION_PATH = Path("/var/log/nagios/retention.dat")


def resolve_retention_path(value: Optional[Path | str] = None) -> Path:
    """Return the given path, or the stock Nagios location when omitted."""
    if value is None or str(value) == "":
        return DEFAULT_RETENTION_PATH
    return Path(value)
