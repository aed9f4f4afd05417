"""
Wero tracker bundle models (output shape of `data.json` at the program root).

TypedDicts keep the bundle JSON-friendly while staying checkable. Optional
members are `NotRequired`: an absent value is an absent key, never `null`, so
serializing a model with `json.dumps` emits exactly the keys that were set.

Layout
------
    WeroData
      lastUpdated   ISO-8601 UTC, time of the bundling run
      dataSource    canonical source repository URL
      countries[]   Country, sorted by code
        code        upper-cased country directory name
        banks[]     Bank, sorted by name (locale-aware)
"""

from typing import NotRequired, TypedDict


class BankFeatures(TypedDict, total=False):
    """Capability flags; a flag missing from the source stays missing."""

    p2p: bool
    onlinePayments: bool
    localPayments: bool


class AppAvailability(TypedDict, total=False):
    """Where Wero is usable; same missing-stays-missing rule."""

    weroApp: bool
    bankingApp: bool


class Bank(TypedDict):
    """One bank, normalized from `<data>/<country>/<bank>/data.json`."""

    id: str  # bank directory name
    name: str
    status: str  # passed through as-is
    features: BankFeatures
    appAvailability: AppAvailability
    lastUpdated: str  # mtime of the source data.json

    logo: NotRequired[str]  # absolute URL
    website: NotRequired[str]
    sources: NotRequired[list[str]]  # only when non-empty
    note: NotRequired[str]


class Country(TypedDict):
    code: str
    banks: list[Bank]


class WeroData(TypedDict):
    lastUpdated: str
    dataSource: str
    countries: list[Country]


FEATURE_KEYS: tuple[str, ...] = ("p2p", "onlinePayments", "localPayments")
APP_AVAILABILITY_KEYS: tuple[str, ...] = ("weroApp", "bankingApp")

__all__ = [
    "BankFeatures",
    "AppAvailability",
    "Bank",
    "Country",
    "WeroData",
    "FEATURE_KEYS",
    "APP_AVAILABILITY_KEYS",
]
