"""ReversibleVariable — integer state that can be assigned and un-assigned."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..config import VariableConfig
from ..observers import ObserverRegistry, TraceObserver
from ..primitives.exceptions import HistoryUnderflowError
from .events import (
    UnassignRejected,
    VariableAssigned,
    VariableCreated,
    VariableEvent,
    VariableRead,
    VariableUnassigned,
)
from .history import DeltaHistory
from .snapshot import VariableSnapshot

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..observers import VariableObserver


class ReversibleVariable(BaseModel):
    """A named integer whose every assignment can be exactly undone.

    Each :meth:`assign` pushes the signed delta between the new and the old
    value; :meth:`un_assign` pops it and subtracts it back. The history starts
    as ``[0]`` so creation itself is a recorded step, and at every point
    ``value == sum(history)``.

    State transitions produce :class:`VariableEvent` records. Observers get
    every event synchronously; creation, assign and un-assign events are also
    kept until :meth:`collect_events` is called.

    Usage::

        x = ReversibleVariable("x")
        x.assign(5)
        x.assign(2)
        x.history      # (0, 5, -3)
        x.un_assign()
        x.get()        # 5

        traced = ReversibleVariable("y", debug=True)  # logs to "rimp.trace"
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(frozen=True)

    _value: int = PrivateAttr(default=0)
    _history: DeltaHistory = PrivateAttr(default_factory=DeltaHistory)
    _config: VariableConfig = PrivateAttr(default_factory=VariableConfig)
    _observers: ObserverRegistry = PrivateAttr(default_factory=ObserverRegistry)
    _pending_events: list[VariableEvent] = PrivateAttr(
        default_factory=lambda: cast("list[VariableEvent]", [])
    )

    def __init__(
        self,
        name: str,
        debug: bool | None = None,
        *,
        config: VariableConfig | None = None,
        observers: Iterable[VariableObserver] = (),
    ) -> None:
        """
        Create a variable with value 0 and history ``[0]``.

        Args:
            name: Identifier used in diagnostics and inspection output.
            debug: Attach a :class:`TraceObserver` writing to the
                ``rimp.trace`` logger.
            config: Full configuration; mutually exclusive with ``debug``.
            observers: Extra observers, notified after the trace observer.

        Raises:
            ValueError: If both ``debug`` and ``config`` are given.
        """
        if debug is not None and config is not None:
            raise ValueError("Pass either 'debug' or 'config', not both.")
        if config is None:
            config = VariableConfig(debug=bool(debug))

        super().__init__(name=name)
        self._config = config
        if config.debug:
            self._observers.register(TraceObserver())
        for observer in observers:
            self._observers.register(observer)

        self._record(VariableCreated(variable_name=self.name))

    # ── Forward / backward execution ─────────────────────────────

    def assign(self, new_value: int) -> VariableAssigned:
        """Set the value to *new_value*, recording the delta."""
        if isinstance(new_value, bool) or not isinstance(new_value, int):
            raise TypeError(
                f"{self.name!r} holds integers, got {type(new_value).__name__}"
            )
        delta = new_value - self._value
        self._history.push(delta)
        self._value = new_value

        event = VariableAssigned(
            variable_name=self.name,
            target=new_value,
            delta=delta,
            depth=len(self._history),
        )
        self._record(event)
        return event

    def un_assign(self) -> VariableUnassigned:
        """Undo the most recent assignment.

        Raises:
            HistoryUnderflowError: If only the creation sentinel remains.
                Value and history are left unchanged.
        """
        if not self._history.can_pop():
            depth = len(self._history)
            self._observers.notify(
                UnassignRejected(
                    variable_name=self.name, value=self._value, depth=depth
                )
            )
            raise HistoryUnderflowError(self.name, depth)

        delta = self._history.top()
        reverted = self._value - delta
        self._history.pop()
        self._value = reverted

        event = VariableUnassigned(
            variable_name=self.name,
            reverted_to=reverted,
            delta=delta,
            depth=len(self._history),
        )
        self._record(event)
        return event

    def get(self) -> int:
        """Return the current value."""
        self._observers.notify(VariableRead(variable_name=self.name, value=self._value))
        return self._value

    # ── Inspection ───────────────────────────────────────────────

    def inspect(self) -> VariableSnapshot:
        """Return an immutable snapshot of name, value and history."""
        return VariableSnapshot(
            name=self.name, value=self._value, deltas=self._history.as_tuple()
        )

    @property
    def value(self) -> int:
        """Current value, without emitting a read event."""
        return self._value

    @property
    def history(self) -> tuple[int, ...]:
        """Every delta in push order, creation sentinel first."""
        return self._history.as_tuple()

    @property
    def depth(self) -> int:
        return len(self._history)

    @property
    def can_un_assign(self) -> bool:
        return self._history.can_pop()

    @property
    def config(self) -> VariableConfig:
        return self._config

    @property
    def observers(self) -> ObserverRegistry:
        return self._observers

    # ── Copying ──────────────────────────────────────────────────

    def __copy__(self) -> ReversibleVariable:
        """Copy with its own history, observer registry and event list."""
        clone = super().__copy__()
        clone._history = self._history.copy()
        clone._observers = ObserverRegistry(self._observers)
        clone._pending_events = []
        return clone

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> ReversibleVariable:
        clone = self.__copy__()
        if memo is not None:
            memo[id(self)] = clone
        return clone

    # ── Events ───────────────────────────────────────────────────

    def collect_events(self) -> list[VariableEvent]:
        """Return the recorded state-change events and clear the list."""
        events = list(self._pending_events)
        self._pending_events.clear()
        return events

    def _record(self, event: VariableEvent) -> None:
        self._pending_events.append(event)
        self._observers.notify(event)

    def __str__(self) -> str:
        return self.inspect().render()

    def __repr__(self) -> str:
        return (
            f"ReversibleVariable(name={self.name!r}, value={self._value}, "
            f"history={list(self._history)})"
        )
