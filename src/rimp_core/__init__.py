"""rimp-core — reversible integer variables for the RIMP runtime.

Every assignment is recorded as an invertible delta, so backward execution
is an exact inverse of forward execution.
"""

from __future__ import annotations

from .config import DEBUG_ENV_VAR, VariableConfig

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    SENTINEL_DELTA,
    DeltaHistory,
    ReversibleVariable,
    UnassignRejected,
    VariableAssigned,
    VariableCreated,
    VariableEvent,
    VariableRead,
    VariableSnapshot,
    VariableUnassigned,
)

# ── Observers ────────────────────────────────────────────────────
from .observers import ObserverRegistry, TraceObserver, VariableObserver, format_trace

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    DomainError,
    HistoryUnderflowError,
    InvariantViolationError,
    RIMPError,
)

__all__: list[str] = [
    # Domain
    "DeltaHistory",
    "ReversibleVariable",
    "SENTINEL_DELTA",
    "VariableSnapshot",
    # Events
    "UnassignRejected",
    "VariableAssigned",
    "VariableCreated",
    "VariableEvent",
    "VariableRead",
    "VariableUnassigned",
    # Observers
    "ObserverRegistry",
    "TraceObserver",
    "VariableObserver",
    "format_trace",
    # Configuration
    "DEBUG_ENV_VAR",
    "VariableConfig",
    # Primitives
    "DomainError",
    "HistoryUnderflowError",
    "InvariantViolationError",
    "RIMPError",
]
