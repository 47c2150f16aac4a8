#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""apps/cli/commands/analyze.py

Download (if needed), parse and analyze the loot datasheets, then write the
HTML report. Thin UI layer: all resolution logic lives in `nwloot`.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections import Counter
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from apps.cli.cli_common import console, setup_logging, write_json, write_text
from nwloot.analyzer import AnalyzerSettings, LootAnalyzer
from nwloot.conditions import EnemyContext, LocationContext, ProbabilityContext
from nwloot.config import ConfigLoader
from nwloot.loader import DataLoader, DataLoadError
from nwloot.render import analysis_to_dict, loot_to_dict, print_tables, render_html

HTML_REPORT = "lootTables.html"
JSON_REPORT = "lootTables.json"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nwloot analyze",
        description="Analyze the loot tables of New World. Creates HTML output.",
    )
    p.add_argument("-f", "--force-download", action="store_true", help="Force download of data files, even if they exist")
    p.add_argument("-s", "--source", default=None, help="Data file source (URL)")
    p.add_argument("-d", "--data", default=None, help="Data directory")
    p.add_argument("-t", "--table", action="append", default=None, help="Table to analyze. Can be specified multiple times")
    p.add_argument("-o", "--output", default=None, help="Output directory")
    p.add_argument("--no-analysis", action="store_true", help="Skip analysis, print parsed data as JSON. Cannot be combined with --output")
    p.add_argument("--json", action="store_true", help=f"Also write {JSON_REPORT}")
    p.add_argument("--print", dest="print_tables", action="store_true", help="Print analyzed tables to the terminal")
    p.add_argument("--config", default=None, help="Settings file (default: conf/settings.ini)")

    ctx = p.add_argument_group("probability context")
    ctx.add_argument("--location-name", default=None)
    ctx.add_argument("--location-type", default=None)
    ctx.add_argument("--location-level", type=int, default=None)
    ctx.add_argument("--enemy-name", default=None)
    ctx.add_argument("--enemy-type", default=None)
    ctx.add_argument("--enemy-level", type=int, default=None)
    elite = ctx.add_mutually_exclusive_group()
    elite.add_argument("--elite", dest="enemy_elite", action="store_const", const=True, default=None)
    elite.add_argument("--common", dest="enemy_elite", action="store_const", const=False)
    water = ctx.add_mutually_exclusive_group()
    water.add_argument("--salt", dest="salt", action="store_const", const=True, default=None)
    water.add_argument("--fresh", dest="salt", action="store_const", const=False)
    ctx.add_argument("--character-level", type=int, default=None)

    beh = p.add_argument_group("analysis")
    beh.add_argument("--force-merge", action="store_true", default=None, help="Merge duplicate items even without a context")
    beh.add_argument("--bucket-threshold", type=int, default=None, help="Largest loot bucket expanded item by item")

    log = p.add_mutually_exclusive_group()
    log.add_argument("-v", "--verbose", action="store_true")
    log.add_argument("-q", "--quiet", action="store_true")
    return p


def context_from_args(args: argparse.Namespace) -> ProbabilityContext:
    location = None
    if any(v is not None for v in (args.location_name, args.location_type, args.location_level)):
        location = LocationContext(name=args.location_name, type=args.location_type, level=args.location_level)
    enemy = None
    if any(v is not None for v in (args.enemy_name, args.enemy_type, args.enemy_level, args.enemy_elite)):
        enemy = EnemyContext(
            name=args.enemy_name,
            type=args.enemy_type,
            level=args.enemy_level,
            elite=args.enemy_elite,
        )
    return ProbabilityContext(
        location=location,
        enemy=enemy,
        salt=args.salt,
        character_level=args.character_level,
    )


def settings_from_args(args: argparse.Namespace, cfg: ConfigLoader) -> AnalyzerSettings:
    force_merge = args.force_merge if args.force_merge is not None else cfg.get_bool("ANALYSIS", "FORCE_MERGE")
    threshold = args.bucket_threshold
    if threshold is None:
        threshold = cfg.get_int("ANALYSIS", "BUCKET_THRESHOLD")
    return AnalyzerSettings(
        context=context_from_args(args),
        force_merge=bool(force_merge),
        bucket_threshold=threshold,
    )


def _diagnostics_table(diagnostics) -> Optional[Table]:
    counts = Counter(d.kind.value for d in diagnostics)
    if not counts:
        return None
    table = Table(title="Diagnostics", box=None, show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="bold")
    table.add_column("Count", justify="right")
    for kind, count in sorted(counts.items()):
        table.add_row(kind, str(count))
    return table


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.no_analysis and args.output:
        parser.error("--no-analysis cannot be combined with --output")

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    cfg = ConfigLoader(args.config)

    try:
        settings = settings_from_args(args, cfg)
    except ValueError as e:
        parser.error(str(e))

    loader = DataLoader.from_config(cfg, data_dir=args.data, repository=args.source)
    try:
        loader.ensure(force=args.force_download)
        loot = loader.load()
    except (DataLoadError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        return 1

    if args.no_analysis:
        sys.stdout.write(json.dumps(loot_to_dict(loot), ensure_ascii=False) + "\n")
        return 0

    analyzer = LootAnalyzer(loot, settings)
    tables = analyzer.analyze(args.table)
    diagnostics = analyzer.diagnostics

    out_dir = Path(args.output) if args.output else cfg.get_path("PATHS", "OUTPUT_DIR")
    html_path = out_dir / HTML_REPORT
    write_text(html_path, render_html(tables, diagnostics=diagnostics))
    console.print(f"[green]Wrote {len(tables)} loot tables to {html_path}[/green]")
    if args.json:
        json_path = out_dir / JSON_REPORT
        write_json(json_path, analysis_to_dict(tables, diagnostics))
        console.print(f"[green]Wrote {json_path}[/green]")

    if args.print_tables:
        print_tables(Console(), tables)

    summary = _diagnostics_table(diagnostics)
    if summary is not None:
        console.print(summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
