"""Domain exceptions for rimp-core."""

from __future__ import annotations


class RIMPError(Exception):
    """Root exception for the rimp-core runtime."""


class DomainError(RIMPError):
    """Base class for all domain-related errors."""


class InvariantViolationError(DomainError):
    """Raised when an operation would break a domain invariant."""


class HistoryUnderflowError(InvariantViolationError):
    """Raised when ``un_assign`` is called with no recorded delta left to undo.

    The variable's value and history are left exactly as they were before
    the call.
    """

    def __init__(self, variable_name: str, depth: int) -> None:
        self.variable_name = variable_name
        self.depth = depth
        super().__init__(
            f"Cannot un-assign {variable_name!r}: no delta to undo "
            f"(history depth={depth})"
        )
