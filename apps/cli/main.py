#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Unified CLI dispatcher for nwloot."""

from __future__ import annotations

import importlib
import sys
from typing import List, Optional, Tuple

from apps.cli.registry import DEFAULT_TOOL, get_tools


def _resolve_tool(argv: List[str]) -> Tuple[str, List[str]]:
    """Return (module, remaining args). Unknown first args go to the default tool."""
    tools = get_tools()
    default = next(t for t in tools if t["alias"] == DEFAULT_TOOL)
    if not argv:
        return default["module"], []

    key = str(argv[0]).strip()
    for tool in tools:
        if tool["alias"] == key:
            return tool["module"], argv[1:]
    return default["module"], argv


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(argv) if argv is not None else list(sys.argv[1:])
    module, rest = _resolve_tool(argv)
    return int(importlib.import_module(module).main(rest) or 0)


if __name__ == "__main__":
    raise SystemExit(main())
