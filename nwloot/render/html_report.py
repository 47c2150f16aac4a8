# -*- coding: utf-8 -*-
"""Standalone HTML document for analyzed loot tables."""

from __future__ import annotations

import html
from datetime import datetime
from typing import List, Optional, Sequence

from nwloot.diagnostics import Diagnostic
from nwloot.model import AnalyzedLootItem, AnalyzedLootTable
from nwloot.render.formatting import describe_conditions, format_probability, format_range

__all__ = ["render_html"]


def _esc(value: object) -> str:
    return html.escape("" if value is None else str(value))


def _slug(text: str) -> str:
    return "".join(ch if ch.isalnum() or ch in "-_" else "-" for ch in text.lower())


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _render_item(item: AnalyzedLootItem) -> str:
    perks = " ".join(p for p in (item.perk_bucket_overrides, item.perk_overrides) if p)
    return (
        "<tr>"
        f"<td class=\"name\">{_esc(item.name)}</td>"
        f"<td class=\"num\">{_esc(format_probability(item.probability))}</td>"
        f"<td class=\"num\">{_esc(format_range(item.quantity))}</td>"
        f"<td class=\"num\">{_esc(format_range(item.gear_score))}</td>"
        f"<td>{_esc(perks)}</td>"
        f"<td>{_esc('; '.join(describe_conditions(item.conditions)))}</td>"
        "</tr>"
    )


def _render_table(table: AnalyzedLootTable) -> str:
    rows = "\n".join(_render_item(item) for item in table.items)
    if not rows:
        rows = "<tr><td colspan=\"6\" class=\"empty\">No eligible items.</td></tr>"
    mode = "multiple items" if table.multiple else "one item"
    return f"""
    <section class="loot-table" id="{_esc(_slug(table.id))}">
      <h2>{_esc(table.id)}</h2>
      <div class="meta">
        <span>Drops: {mode}</span>
        <span>HWM multiplier: {_esc(table.high_water_mark_multiplier)}</span>
        <span>GS bonus: {_esc(table.gear_score_bonus)}</span>
        <span>Level GS: {_yes_no(table.use_level_gear_score)}</span>
        <span>Luck safe: {_yes_no(table.luck_safe)}</span>
      </div>
      <table>
        <thead><tr><th>Item</th><th>Probability</th><th>Quantity</th><th>Gear score</th><th>Perks</th><th>Conditions</th></tr></thead>
        <tbody>
{rows}
        </tbody>
      </table>
    </section>"""


def _render_diagnostics(diagnostics: Sequence[Diagnostic]) -> str:
    warnings = [d for d in diagnostics if d.is_warning]
    if not warnings:
        return ""
    lines = "\n".join(f"<li>{_esc(d.message)}</li>" for d in warnings)
    return f"""
    <section class="diagnostics">
      <h2>Data warnings ({len(warnings)})</h2>
      <ul>
{lines}
      </ul>
    </section>"""


def render_html(
    tables: Sequence[AnalyzedLootTable],
    *,
    title: str = "Loot Table Analysis",
    diagnostics: Optional[Sequence[Diagnostic]] = None,
) -> str:
    toc: List[str] = [f'<li><a href="#{_esc(_slug(t.id))}">{_esc(t.id)}</a></li>' for t in tables]
    sections = "".join(_render_table(t) for t in tables)
    generated = datetime.now().astimezone().isoformat(timespec="seconds")
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width, initial-scale=1"/>
  <title>{_esc(title)}</title>
  <style>
    body {{ margin: 0 auto; max-width: 1200px; padding: 24px; font-family: "Helvetica Neue", sans-serif; color: #161f1e; }}
    nav ul {{ columns: 3; font-size: 0.85em; }}
    .loot-table {{ margin-top: 32px; }}
    .meta span {{ margin-right: 16px; color: #52615f; font-size: 0.9em; }}
    table {{ border-collapse: collapse; width: 100%; margin-top: 8px; }}
    th, td {{ border-bottom: 1px solid rgba(31, 90, 86, 0.18); padding: 4px 8px; text-align: left; }}
    td.num {{ text-align: right; font-family: monospace; }}
    td.empty {{ color: #52615f; font-style: italic; }}
    .diagnostics {{ color: #c75f2b; }}
  </style>
</head>
<body>
  <h1>{_esc(title)}</h1>
  <p class="generated">Generated {_esc(generated)} &middot; {len(tables)} loot tables</p>
  <nav><ul>
{chr(10).join(toc)}
  </ul></nav>
{_render_diagnostics(diagnostics or [])}
{sections}
</body>
</html>
"""
