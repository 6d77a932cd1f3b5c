"""DeltaHistory — non-empty stack of invertible deltas."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

SENTINEL_DELTA = 0


class DeltaHistory:
    """LIFO stack of signed deltas that can never be emptied.

    The sentinel delta recorded at creation is held apart from the undoable
    deltas, so it is never popped. Iteration and :meth:`as_tuple` yield the
    sentinel first, then every pushed delta in push order.

    Usage::

        history = DeltaHistory()
        history.push(5)
        history.push(-3)
        history.as_tuple()  # (0, 5, -3)
        history.pop()       # -3
    """

    __slots__ = ("_undoable",)

    def __init__(self) -> None:
        self._undoable: list[int] = []

    def push(self, delta: int) -> None:
        """Record a delta on top of the stack."""
        self._undoable.append(delta)

    def pop(self) -> int:
        """Remove and return the most recent delta.

        Raises:
            IndexError: If only the sentinel remains.
        """
        if not self._undoable:
            raise IndexError("pop from a history holding only its sentinel")
        return self._undoable.pop()

    def top(self) -> int:
        """Return the most recent delta, the sentinel if nothing was pushed."""
        if self._undoable:
            return self._undoable[-1]
        return SENTINEL_DELTA

    def can_pop(self) -> bool:
        return bool(self._undoable)

    def copy(self) -> DeltaHistory:
        """Return an independent history holding the same deltas."""
        clone = DeltaHistory()
        clone._undoable = list(self._undoable)
        return clone

    def as_tuple(self) -> tuple[int, ...]:
        return (SENTINEL_DELTA, *self._undoable)

    def __len__(self) -> int:
        return 1 + len(self._undoable)

    def __iter__(self) -> Iterator[int]:
        yield SENTINEL_DELTA
        yield from self._undoable

    def __repr__(self) -> str:
        return f"DeltaHistory({list(self.as_tuple())!r})"
