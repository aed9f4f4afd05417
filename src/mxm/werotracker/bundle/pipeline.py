"""
Bundle the whole data tree into a single `WeroData` document.

Layout (under `root_dir`, the directory of the running program):
    <root_dir>/
      ├─ data/
      │   ├─ <country>/<bank-id>/data.json
      │   └─ ...
      └─ data.json              # bundle output, rewritten on every run

The bundle is always rebuilt from scratch. It is written only after the
whole tree has been read, so a fatal error leaves any previous bundle
untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, cast

from mxm.werotracker.bundle.aggregator import iter_subdirs, read_country_data
from mxm.werotracker.bundle.models import Country, WeroData
from mxm.werotracker.common.collation import collation_key
from mxm.werotracker.common.file_io import replace_json
from mxm.werotracker.common.timestamps import Clock, utc_now, utc_now_iso
from mxm.werotracker.common.types import JSONLike
from mxm.werotracker.config.config import BundleConfig, load_bundle_config


class DataDirNotFoundError(FileNotFoundError):
    def __init__(self, data_dir: Path) -> None:
        super().__init__(f"Data directory not found: {data_dir}")
        self.data_dir = data_dir


@dataclass(frozen=True)
class BundleStats:
    output_path: Path
    countries: int
    banks: int
    skipped: tuple[str, ...] = field(default_factory=tuple)


def bundle_data(
    data_dir: Path,
    *,
    cfg: BundleConfig,
    clock: Clock = utc_now,
    skipped: Optional[list[str]] = None,
) -> WeroData:
    """
    Read all countries under `data_dir` into a `WeroData` document.

    Countries without any readable bank are dropped. Countries are ordered by
    `code`; banks within a country by name.

    Args:
        data_dir: Root of the country directories.
        cfg: Bundle settings.
        clock: Source of the document-level `lastUpdated`.
        skipped: If given, receives "<country>/<bank-id>" for each bank whose
            data file is missing.

    Raises:
        DataDirNotFoundError: If `data_dir` does not exist.
        MalformedBankDataError: If any bank's data file is malformed.
    """
    if not data_dir.is_dir():
        raise DataDirNotFoundError(data_dir)

    countries: list[Country] = []

    for country_dir in iter_subdirs(data_dir):
        code = country_dir.name

        def _record_skip(bank_id: str, code: str = code) -> None:
            if skipped is not None:
                skipped.append(f"{code}/{bank_id}")

        country = read_country_data(
            country_dir, code, cfg=cfg, on_skip=_record_skip
        )
        if country["banks"]:
            countries.append(country)

    countries.sort(key=lambda c: collation_key(c["code"]))

    return {
        "lastUpdated": utc_now_iso(clock),
        "dataSource": cfg.repository,
        "countries": countries,
    }


def write_bundle(data: WeroData, output_path: Path) -> Path:
    """Persist the bundle as pretty-printed UTF-8 JSON, replacing any prior one."""
    return replace_json(output_path, cast(JSONLike, data))


def count_banks(data: WeroData) -> int:
    return sum(len(country["banks"]) for country in data["countries"])


def run(
    root_dir: Path,
    *,
    cfg: Optional[BundleConfig] = None,
    clock: Clock = utc_now,
) -> tuple[WeroData, BundleStats]:
    """Bundle `<root_dir>/<data_dir>` and write `<root_dir>/<output_filename>`."""
    cfg = cfg or load_bundle_config()
    skipped: list[str] = []

    data = bundle_data(cfg.data_root(root_dir), cfg=cfg, clock=clock, skipped=skipped)
    output_path = write_bundle(data, cfg.output_path(root_dir))

    stats = BundleStats(
        output_path=output_path,
        countries=len(data["countries"]),
        banks=count_banks(data),
        skipped=tuple(skipped),
    )
    return data, stats


__all__ = [
    "BundleStats",
    "DataDirNotFoundError",
    "bundle_data",
    "count_banks",
    "run",
    "write_bundle",
]
