"""Shared fixtures for the downtime report tests."""

import time
from pathlib import Path

import pytest


SAMPLE_RETENTION = """\
########################################
#          NAGIOS RETENTION FILE
#
# THIS FILE IS AUTOMATICALLY GENERATED
# BY NAGIOS.  DO NOT MODIFY THIS FILE!
########################################
info {
created=1700000000
version=4.4.6
}
program {
modified_host_attributes=0
enable_notifications=1
}
host {
host_name=web1
end_time=5
}
servicedowntime {
host_name=db1
service_description=PostgreSQL
downtime_id=12
entry_time=1700000100
start_time=1700000200
end_time=1700090000
triggered_by=0
fixed=1
duration=7200
is_in_effect=0
author=alice
comment=Upgrade to 16, ticket #4711
}
hostdowntime {
host_name=web1
downtime_id=7
entry_time=1700000000
start_time=1700000000
end_time=1700003600
is_in_effect=1
author=bob
comment=kernel patching
}
hostdowntime {
host_name=web2
downtime_id=8
start_time=1700000000
}
"""


@pytest.fixture
def utc_clock(monkeypatch):
    """Pin the local timezone to UTC so epoch renderings are stable."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def retention_file(tmp_path) -> Path:
    path = tmp_path / "retention.dat"
    path.write_text(SAMPLE_RETENTION)
    return path
