"""
Configuration for mxm-werotracker.

Defaults live in `default.yaml` next to this module and are loaded with
OmegaConf. Callers (mostly tests) may pass overrides, which are merged on top
of the shipped defaults and validated against them:

    cfg = load_bundle_config({"raw_content_base": "https://cdn.example.test"})
    cfg.logo_url("de", "acme-bank", "logo.svg")
    # 'https://cdn.example.test/data/de/acme-bank/logo.svg'

The resolved values are exposed as a frozen `BundleConfig`; nothing reads the
environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, cast

from omegaconf import DictConfig, OmegaConf

DEFAULTS_PATH = Path(__file__).with_name("default.yaml")

_REQUIRED_KEYS = (
    "repository",
    "raw_content_base",
    "assets_path",
    "data_dir",
    "record_filename",
    "output_filename",
)


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class BundleConfig:
    """Resolved bundle settings."""

    repository: str
    raw_content_base: str
    assets_path: str
    data_dir: str
    record_filename: str
    output_filename: str

    def logo_url(self, country_code: str, bank_id: str, filename: str) -> str:
        """<raw_content_base>/<assets_path>/<country>/<bank>/<filename>"""
        base = self.raw_content_base.rstrip("/")
        return f"{base}/{self.assets_path}/{country_code}/{bank_id}/{filename}"

    def data_root(self, root_dir: Path) -> Path:
        return root_dir / self.data_dir

    def output_path(self, root_dir: Path) -> Path:
        return root_dir / self.output_filename


def _must_have(d: DictConfig, path: str, keys: Iterable[str]) -> None:
    missing = [k for k in keys if k not in d or d[k] in (None, "")]
    if missing:
        raise ConfigError(f"Missing keys at {path}: {', '.join(missing)}")


def bundle_view(overrides: Optional[Mapping[str, Any]] = None) -> DictConfig:
    """Read-only view rooted at `bundle`, with `overrides` merged in."""
    root = cast(DictConfig, OmegaConf.load(DEFAULTS_PATH))
    view = cast(DictConfig, root.bundle)
    if overrides:
        unknown = sorted(set(overrides) - {str(k) for k in view.keys()})
        if unknown:
            raise ConfigError(f"Unknown bundle settings: {', '.join(unknown)}")
        view = cast(DictConfig, OmegaConf.merge(view, dict(overrides)))
    OmegaConf.set_readonly(view, True)
    return view


def load_bundle_config(
    overrides: Optional[Mapping[str, Any]] = None,
) -> BundleConfig:
    """Load shipped defaults (plus `overrides`) into a `BundleConfig`.

    Raises:
      ConfigError: If an override names an unknown key, or a required key
        resolves to an empty value.
    """
    view = bundle_view(overrides)
    _must_have(view, "bundle", _REQUIRED_KEYS)
    return BundleConfig(**{key: str(view[key]) for key in _REQUIRED_KEYS})


__all__ = [
    "DEFAULTS_PATH",
    "BundleConfig",
    "ConfigError",
    "bundle_view",
    "load_bundle_config",
]
