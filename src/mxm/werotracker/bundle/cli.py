"""
Console entry point for bundling.

Exit status:
    0  bundle written
    1  data directory missing (nothing written)

A malformed bank record raises `MalformedBankDataError` out of `main`, which
also terminates the interpreter with a non-zero status and writes nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from mxm.werotracker.bundle.pipeline import BundleStats, DataDirNotFoundError, run
from mxm.werotracker.common.timestamps import Clock, utc_now
from mxm.werotracker.config.config import BundleConfig

console = Console()
err_console = Console(stderr=True)


def display_summary(stats: BundleStats) -> None:
    console.print(
        f"[green]✓[/green] Bundled data written to {escape(str(stats.output_path))}",
        soft_wrap=True,
    )
    console.print(f"  - {stats.countries} countries")
    console.print(f"  - {stats.banks} banks total")
    if stats.skipped:
        console.print(
            f"  - [yellow]{len(stats.skipped)} banks skipped (no data file):[/yellow] "
            + escape(", ".join(stats.skipped)),
            soft_wrap=True,
        )


def main(
    root_dir: Path,
    *,
    cfg: Optional[BundleConfig] = None,
    clock: Clock = utc_now,
) -> int:
    """Bundle the data tree under `root_dir`; return the process exit status."""
    try:
        _, stats = run(root_dir, cfg=cfg, clock=clock)
    except DataDirNotFoundError as exc:
        err_console.print(f"[bold red]{escape(str(exc))}[/bold red]", soft_wrap=True)
        return 1

    display_summary(stats)
    return 0


__all__ = ["display_summary", "main"]
