"""Observers — subscribers that turn variable events into side effects."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .domain.events import (
    UnassignRejected,
    VariableAssigned,
    VariableCreated,
    VariableEvent,
    VariableRead,
    VariableUnassigned,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

logger = logging.getLogger("rimp.observers")
trace_logger = logging.getLogger("rimp.trace")


@runtime_checkable
class VariableObserver(Protocol):
    """Protocol for anything that wants to hear about variable events."""

    def __call__(self, event: VariableEvent) -> None:
        """Handle one event."""
        ...


class ObserverRegistry:
    """Ordered set of observers notified synchronously.

    An observer that raises is logged and skipped; the remaining observers
    are still notified and the caller never sees the error.
    """

    def __init__(self, observers: Iterable[VariableObserver] = ()) -> None:
        self._observers: list[VariableObserver] = []
        for observer in observers:
            self.register(observer)

    def register(self, observer: VariableObserver) -> VariableObserver:
        """Register *observer* once; returns it for decorator use."""
        if observer not in self._observers:
            self._observers.append(observer)
        return observer

    def unregister(self, observer: VariableObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: VariableEvent) -> None:
        """Deliver *event* to every registered observer in order."""
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "Observer %r failed on %s: %s",
                    observer,
                    type(event).__name__,
                    exc,
                    exc_info=exc,
                )

    def clear(self) -> None:
        self._observers.clear()

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[VariableObserver]:
        return iter(list(self._observers))

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers


def format_trace(event: VariableEvent) -> str:
    """Format *event* as a single diagnostic line."""
    name = event.variable_name
    if isinstance(event, VariableCreated):
        return f"Creating variable {name}"
    if isinstance(event, VariableAssigned):
        return f"Assigning {name} to {event.target} new size: {event.depth}"
    if isinstance(event, VariableUnassigned):
        return (
            f"Unassigning {name} to {event.reverted_to} "
            f"remaining assignments: {event.depth}"
        )
    if isinstance(event, UnassignRejected):
        return f"Unassigning {name} failed: history is empty"
    if isinstance(event, VariableRead):
        return f"Getting {name} value: {event.value}"
    return f"{type(event).__name__} on {name}"


def _log_line(line: str) -> None:
    trace_logger.info("%s", line)


class TraceObserver:
    """Writes one line per event to a line sink.

    The sink defaults to the ``rimp.trace`` logger at INFO level. Any
    ``Callable[[str], None]`` works, e.g. ``print`` or ``list.append``.
    """

    def __init__(self, sink: Callable[[str], None] | None = None) -> None:
        self._sink = sink or _log_line

    def __call__(self, event: VariableEvent) -> None:
        self._sink(format_trace(event))
