"""VariableSnapshot — read-only view of a variable for inspection output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VariableSnapshot(BaseModel):
    """Name, value and full delta sequence of a variable at one instant.

    ``deltas`` is in push order, oldest first, sentinel included.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: int
    deltas: tuple[int, ...] = Field(min_length=1)

    def render(self) -> str:
        """Render ``"<name>: <value>\\t [<d1> <d2> ... <dn> ]"``."""
        body = "".join(f"{delta} " for delta in self.deltas)
        return f"{self.name}: {self.value}\t [{body}]"

    def expression(self) -> str:
        """Render the deltas as the sum that reconstructs the value."""
        return " + ".join(str(delta) for delta in self.deltas)

    def __str__(self) -> str:
        return self.render()
