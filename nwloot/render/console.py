# -*- coding: utf-8 -*-
"""Rich terminal rendering of analyzed loot tables."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.table import Table

from nwloot.model import AnalyzedLootTable
from nwloot.render.formatting import describe_conditions, format_probability, format_range

__all__ = ["build_table", "print_tables"]


def build_table(table: AnalyzedLootTable) -> Table:
    mode = "AND" if table.multiple else "OR"
    out = Table(title=f"{table.id} [dim]({mode})[/dim]", border_style="blue")
    out.add_column("Item", style="cyan")
    out.add_column("Probability", justify="right", style="bold")
    out.add_column("Qty", justify="right")
    out.add_column("GS", justify="right", style="dim")
    out.add_column("Conditions", style="yellow")
    for item in table.items:
        out.add_row(
            item.name,
            format_probability(item.probability),
            format_range(item.quantity),
            format_range(item.gear_score),
            "; ".join(describe_conditions(item.conditions)),
        )
    return out


def print_tables(console: Console, tables: Sequence[AnalyzedLootTable]) -> None:
    for table in tables:
        if not table.items:
            console.print(f"[dim]{table.id}: no eligible items[/dim]")
            continue
        console.print(build_table(table))
