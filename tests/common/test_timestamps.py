from __future__ import annotations

import os
import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

from mxm.werotracker.common.timestamps import mtime_iso, to_iso_utc, utc_now_iso

ISO_Z_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def test_to_iso_utc_uses_milliseconds_and_z_suffix() -> None:
    moment = datetime(2025, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
    assert to_iso_utc(moment) == "2025-01-02T03:04:05.678Z"


def test_to_iso_utc_converts_other_offsets() -> None:
    cet = timezone(timedelta(hours=1))
    moment = datetime(2025, 1, 2, 4, 0, 0, tzinfo=cet)
    assert to_iso_utc(moment) == "2025-01-02T03:00:00.000Z"


def test_to_iso_utc_treats_naive_as_utc() -> None:
    assert to_iso_utc(datetime(2025, 1, 2)) == "2025-01-02T00:00:00.000Z"


def test_utc_now_iso_uses_clock() -> None:
    fixed = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert utc_now_iso(lambda: fixed) == "2024-06-01T12:00:00.000Z"
    assert ISO_Z_RE.match(utc_now_iso())


def test_mtime_iso_reflects_file_modification_time(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("{}", encoding="utf-8")
    stamp = datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc).timestamp()
    os.utime(path, (stamp, stamp))

    assert mtime_iso(path) == "2024-03-15T09:30:00.000Z"
