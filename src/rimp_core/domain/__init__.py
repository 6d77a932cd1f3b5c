"""Domain primitives: the reversible variable, its history, events, snapshot."""

from __future__ import annotations

from .events import (
    UnassignRejected,
    VariableAssigned,
    VariableCreated,
    VariableEvent,
    VariableRead,
    VariableUnassigned,
)
from .history import SENTINEL_DELTA, DeltaHistory
from .snapshot import VariableSnapshot
from .variable import ReversibleVariable

__all__: list[str] = [
    "DeltaHistory",
    "ReversibleVariable",
    "SENTINEL_DELTA",
    "UnassignRejected",
    "VariableAssigned",
    "VariableCreated",
    "VariableEvent",
    "VariableRead",
    "VariableSnapshot",
    "VariableUnassigned",
]
