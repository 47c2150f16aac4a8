# -*- coding: utf-8 -*-
"""Project configuration (conf/settings.ini)."""

from nwloot.config.loader import DEFAULTS, ConfigLoader, get_config

__all__ = ["DEFAULTS", "ConfigLoader", "get_config"]
