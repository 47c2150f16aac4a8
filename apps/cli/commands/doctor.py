#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""apps/cli/commands/doctor.py

Health check for an nwloot checkout: settings file, analysis settings,
cached datasheets and the report directory.

Exit codes (only with --enforce): 2 on FAIL, 1 on WARN under --strict.
"""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import List, Optional

from rich.panel import Panel
from rich.table import Table

from apps.cli.cli_common import CONF_DIR, PROJECT_ROOT, console
from nwloot.config import ConfigLoader
from nwloot.loader import DataLoader

CONFIG_PATH = CONF_DIR / "settings.ini"

STATUS_STYLE = {"PASS": "green", "WARN": "yellow", "FAIL": "red"}


class HealthReport:
    """Rows of the health check table plus a tally per level."""

    def __init__(self) -> None:
        self.table = Table(title="Health Checks", box=None, show_header=True, header_style="bold cyan")
        self.table.add_column("Check", style="bold")
        self.table.add_column("Status", justify="center")
        self.table.add_column("Details", style="dim")
        self.table.add_column("Fix Hint", style="green")
        self.counts: Counter = Counter()

    def add(self, check: str, level: str, details: str, fix: str = "") -> None:
        style = STATUS_STYLE[level]
        self.table.add_row(check, f"[{style}]{level}[/{style}]", details, "" if level == "PASS" else fix)
        self.counts[level] += 1

    def add_path(self, check: str, path: Path, fix: str, *, directory: bool = False) -> None:
        ok = path.is_dir() if directory else path.is_file()
        self.add(check, "PASS" if ok else "WARN", str(path), fix)


def _check_analysis(report: HealthReport, cfg: ConfigLoader) -> None:
    try:
        threshold = cfg.get_int("ANALYSIS", "BUCKET_THRESHOLD")
        force_merge = cfg.get_bool("ANALYSIS", "FORCE_MERGE")
    except ValueError as e:
        report.add("ANALYSIS section", "FAIL", str(e), "Check ini value types")
        return
    details = f"bucket threshold={threshold}, force merge={force_merge}"
    report.add("ANALYSIS section", "PASS" if threshold >= 0 else "FAIL", details, "Use a threshold >= 0")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="nwloot doctor", description="nwloot Doctor (config + data health check)")
    p.add_argument("--config", default=None, help="Settings file (default: conf/settings.ini)")
    p.add_argument("--enforce", action="store_true", help="exit non-zero on failures (CI)")
    p.add_argument("--strict", action="store_true", help="treat WARN as FAIL (only when --enforce)")
    args = p.parse_args(argv)

    console.print(Panel("[bold cyan]nwloot Doctor[/bold cyan]", border_style="cyan"))
    report = HealthReport()

    # missing settings file is fine, built-in defaults apply
    config_path = Path(args.config) if args.config else CONFIG_PATH
    report.add_path("settings.ini", config_path, "Optional: built-in defaults are used")

    cfg = ConfigLoader(args.config)
    _check_analysis(report, cfg)

    loader = DataLoader.from_config(cfg)
    for role in loader.files:
        report.add_path(f"data/{role}", loader.path(role), "Run `nwloot analyze -f` to download")

    report.add_path(
        "OUTPUT_DIR exists",
        cfg.get_path("PATHS", "OUTPUT_DIR"),
        "Created on first analysis run",
        directory=True,
    )

    console.print(report.table)
    fail, warn = report.counts["FAIL"], report.counts["WARN"]
    console.print(f"[dim]Root: {PROJECT_ROOT} | Summary: FAIL={fail}, WARN={warn}[/dim]")

    if not args.enforce:
        return 0
    if fail:
        return 2
    if args.strict and warn:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
