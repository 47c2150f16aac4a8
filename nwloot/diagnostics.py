# -*- coding: utf-8 -*-
"""Structured diagnostics for degraded resolution events.

Events are collected per analysis run so callers (and tests) can inspect them
without scraping log output. Every event is forwarded to the module logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List

__all__ = ["DiagnosticKind", "Diagnostic", "DiagnosticLog"]

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    UNKNOWN_TABLE_REFERENCE = "unknown_table_reference"
    UNKNOWN_BUCKET_REFERENCE = "unknown_bucket_reference"
    CYCLIC_REFERENCE = "cyclic_reference"
    BUCKET_NOT_EXPANDED = "bucket_not_expanded"


# Informational kinds are logged at DEBUG, everything else at WARNING.
_INFO_KINDS = {DiagnosticKind.BUCKET_NOT_EXPANDED}


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    table_id: str
    reference: str
    message: str

    @property
    def is_warning(self) -> bool:
        return self.kind not in _INFO_KINDS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "table_id": self.table_id,
            "reference": self.reference,
            "message": self.message,
        }


class DiagnosticLog:
    """Append-only collection of `Diagnostic` events."""

    def __init__(self) -> None:
        self._events: List[Diagnostic] = []

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def record(self, kind: DiagnosticKind, table_id: str, reference: str, message: str) -> Diagnostic:
        event = Diagnostic(kind=kind, table_id=table_id, reference=reference, message=message)
        self._events.append(event)
        logger.log(logging.WARNING if event.is_warning else logging.DEBUG, message)
        return event

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [e for e in self._events if e.kind == kind]

    def events(self) -> List[Diagnostic]:
        return list(self._events)
