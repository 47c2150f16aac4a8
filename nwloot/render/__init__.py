# -*- coding: utf-8 -*-
"""Renderers for analysis results (HTML, terminal, JSON)."""

from nwloot.render.console import build_table, print_tables
from nwloot.render.export import analysis_to_dict, loot_to_dict
from nwloot.render.formatting import describe_conditions, format_level, format_probability, format_range
from nwloot.render.html_report import render_html

__all__ = [
    "analysis_to_dict",
    "build_table",
    "describe_conditions",
    "format_level",
    "format_probability",
    "format_range",
    "loot_to_dict",
    "print_tables",
    "render_html",
]
