from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from mxm.werotracker.common.timestamps import Clock
from mxm.werotracker.config.config import BundleConfig, load_bundle_config

FIXED_NOW = datetime(2025, 10, 30, 7, 59, 12, 345000, tzinfo=timezone.utc)

WriteBank = Callable[..., Path]


@pytest.fixture
def cfg() -> BundleConfig:
    return load_bundle_config()


@pytest.fixture
def fixed_clock() -> Clock:
    return lambda: FIXED_NOW


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture
def write_bank(data_dir: Path) -> WriteBank:
    """
    Create <data>/<country>/<bank_id>/data.json.

    Usage in tests:
        write_bank("de", "acme-bank", {"name": "Acme Bank", "status": "active"})
        write_bank("de", "broken", raw="{not json")
        write_bank("de", "empty-dir", payload=None)   # directory only
    """

    def _make(
        country: str,
        bank_id: str,
        payload: Optional[dict[str, Any]] = None,
        *,
        raw: Optional[str] = None,
        mtime: Optional[float] = None,
    ) -> Path:
        bank_dir = data_dir / country / bank_id
        bank_dir.mkdir(parents=True, exist_ok=True)
        if payload is None and raw is None:
            return bank_dir
        path = bank_dir / "data.json"
        text = raw if raw is not None else json.dumps(payload, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return bank_dir

    return _make
