"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    DomainError,
    HistoryUnderflowError,
    InvariantViolationError,
    RIMPError,
)

__all__ = [
    "DomainError",
    "HistoryUnderflowError",
    "InvariantViolationError",
    "RIMPError",
]
