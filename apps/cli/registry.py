#!/usr/bin/env python3
"""nwloot command registry."""

from typing import List

TOOLS = [
    {
        "alias": "analyze",
        "module": "apps.cli.commands.analyze",
        "desc": "Analyze loot tables and write the HTML report",
        "usage": "nwloot analyze [-f] [-t TABLE ...] [-o DIR]",
    },
    {
        "alias": "doctor",
        "module": "apps.cli.commands.doctor",
        "desc": "Config and data file health check",
        "usage": "nwloot doctor [--enforce] [--strict]",
    },
]

DEFAULT_TOOL = "analyze"


def get_tools() -> List[dict]:
    return list(TOOLS)
