"""Variable events — one immutable record per operation outcome."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class VariableEvent(BaseModel):
    """Base class for every event a ``ReversibleVariable`` produces.

    Events are immutable. Observers receive them synchronously, right after
    the state transition they describe has completed.
    """

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    variable_name: str


class VariableCreated(VariableEvent):
    """A variable came into existence with value 0 and history ``[0]``."""

    value: int = 0
    depth: int = 1


class VariableAssigned(VariableEvent):
    """Forward step: ``delta`` was pushed and the value is now ``target``."""

    target: int
    delta: int
    depth: int = Field(description="History size after the push")


class VariableUnassigned(VariableEvent):
    """Backward step: ``delta`` was popped and the value reverted."""

    reverted_to: int
    delta: int
    depth: int = Field(description="History size after the pop")


class UnassignRejected(VariableEvent):
    """An un-assign was refused because only the sentinel remained."""

    value: int
    depth: int


class VariableRead(VariableEvent):
    """The current value was read."""

    value: int
