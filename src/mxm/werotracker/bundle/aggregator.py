"""Collect the banks of one country directory."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Optional

from mxm.werotracker.bundle.models import Bank, Country
from mxm.werotracker.bundle.reader import read_bank_data
from mxm.werotracker.common.collation import collation_key
from mxm.werotracker.config.config import BundleConfig

# Called with the id of every bank directory whose data file is missing.
OnSkip = Callable[[str], None]


def iter_subdirs(parent: Path) -> Iterator[Path]:
    """Yield immediate child directories of `parent`, sorted by name.

    Plain files (READMEs, stray logos) are ignored.
    """
    for child in sorted(parent.iterdir(), key=lambda p: p.name):
        if child.is_dir():
            yield child


def read_country_data(
    country_dir: Path,
    country_code: str,
    *,
    cfg: BundleConfig,
    on_skip: Optional[OnSkip] = None,
) -> Country:
    """
    Read every bank under `country_dir` into a `Country`.

    Banks without a data file are left out; the result may therefore have an
    empty `banks` list, and it is up to the caller to drop such countries.
    Errors from `read_bank_data` propagate unchanged.
    """
    banks: list[Bank] = []

    for bank_dir in iter_subdirs(country_dir):
        bank = read_bank_data(bank_dir, bank_dir.name, country_code, cfg=cfg)
        if bank is None:
            if on_skip is not None:
                on_skip(bank_dir.name)
            continue
        banks.append(bank)

    banks.sort(key=lambda b: collation_key(b["name"]))

    return {"code": country_code.upper(), "banks": banks}


__all__ = ["OnSkip", "iter_subdirs", "read_country_data"]
