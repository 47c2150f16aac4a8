# -*- coding: utf-8 -*-
"""Indexes built over a parsed loot data set."""

from nwloot.indexers.reference_index import (
    BUCKET_REFERENCE_PREFIX,
    TABLE_REFERENCE_PREFIX,
    ReferenceIndex,
    build_indexes,
)

__all__ = [
    "BUCKET_REFERENCE_PREFIX",
    "TABLE_REFERENCE_PREFIX",
    "ReferenceIndex",
    "build_indexes",
]
