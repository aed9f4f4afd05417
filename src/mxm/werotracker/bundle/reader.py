"""
Read a single bank record.

Layout:
    <data>/<country>/<bank-id>/
        ├─ data.json      # maintained by contributors
        └─ logo.svg       # optional, referenced by `data.json["logo"]`

A missing `data.json` is reported and skipped (returns None). Anything else
that goes wrong is raised: a record that exists but cannot be read as a JSON
object with a `name` and a `status` is a contributor error and must not
quietly drop out of the bundle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, cast

from rich.console import Console
from rich.markup import escape

from mxm.werotracker.bundle.models import (
    APP_AVAILABILITY_KEYS,
    FEATURE_KEYS,
    AppAvailability,
    Bank,
    BankFeatures,
)
from mxm.werotracker.common.file_io import JSONFileError, read_json_object
from mxm.werotracker.common.timestamps import mtime_iso
from mxm.werotracker.common.types import JSONLike, JSONObject
from mxm.werotracker.config.config import BundleConfig

console = Console()


class MalformedBankDataError(ValueError):
    """A bank's data file exists but is not a usable record."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Malformed bank data in {path}: {reason}")
        self.path = path
        self.reason = reason


def _load_record(path: Path) -> JSONObject:
    try:
        raw = read_json_object(path)
    except JSONFileError as exc:
        raise MalformedBankDataError(path, exc.reason) from exc
    for key in ("name", "status"):
        if not isinstance(raw.get(key), str):
            raise MalformedBankDataError(path, f"missing or non-string '{key}'")
    logo = raw.get("logo")
    if logo and not isinstance(logo, str):
        raise MalformedBankDataError(path, "non-string 'logo'")
    return raw


def _pick(section: JSONLike, keys: tuple[str, ...]) -> dict[str, JSONLike]:
    """Copy `keys` that are present in `section`; absent keys stay absent."""
    if not isinstance(section, Mapping):
        return {}
    return {key: section[key] for key in keys if key in section}


def read_bank_data(
    bank_dir: Path,
    bank_id: str,
    country_code: str,
    *,
    cfg: BundleConfig,
) -> Optional[Bank]:
    """
    Read `<bank_dir>/<record_filename>` and normalize it into a `Bank`.

    Args:
        bank_dir: Directory of the bank.
        bank_id: Bank identifier (the directory name).
        country_code: Country directory name, used only to build the logo URL.
        cfg: Bundle settings (record filename, logo URL base).

    Returns:
        The normalized bank, or None if the data file does not exist.

    Raises:
        MalformedBankDataError: If the data file is not a JSON object with
            string `name` and `status` (and a string `logo`, if any).
    """
    data_path = bank_dir / cfg.record_filename

    if not data_path.exists():
        console.print(
            f"  - [yellow]Warning:[/yellow] {escape(cfg.record_filename)} not found "
            f"for bank {escape(bank_id)} in {escape(str(bank_dir))}",
            soft_wrap=True,
        )
        return None

    raw = _load_record(data_path)

    bank: Bank = {
        "id": bank_id,
        "name": cast(str, raw["name"]),
        "status": cast(str, raw["status"]),
        "features": cast(BankFeatures, _pick(raw.get("features"), FEATURE_KEYS)),
        "appAvailability": cast(
            AppAvailability, _pick(raw.get("appAvailability"), APP_AVAILABILITY_KEYS)
        ),
        "lastUpdated": mtime_iso(data_path),
    }

    logo = raw.get("logo")
    if logo:
        bank["logo"] = cfg.logo_url(country_code, bank_id, cast(str, logo))
    website = raw.get("website")
    if website:
        bank["website"] = cast(str, website)
    sources = raw.get("sources")
    if isinstance(sources, list) and sources:
        bank["sources"] = cast(list[str], sources)
    note = raw.get("note")
    if note:
        bank["note"] = cast(str, note)

    return bank


__all__ = ["MalformedBankDataError", "read_bank_data"]
