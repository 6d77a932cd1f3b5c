"""Variable configuration resolved outside the core."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from collections.abc import Mapping

DEBUG_ENV_VAR = "RIMP_DEBUG"


class VariableConfig(BaseModel):
    """Configuration for a ``ReversibleVariable``.

    Attributes:
        debug: Emit a diagnostic trace line for every operation.
    """

    model_config = ConfigDict(frozen=True)

    debug: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> VariableConfig:
        """Resolve the configuration from environment variables.

        Debug tracing is enabled only when ``RIMP_DEBUG`` is exactly ``"1"``.
        """
        env = os.environ if environ is None else environ
        return cls(debug=env.get(DEBUG_ENV_VAR) == "1")
