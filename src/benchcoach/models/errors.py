"""Exception types raised by lineup generation.

Only hard input problems raise. Expected fairness trade-offs are reported
through GenerationDiagnostics instead.
"""

from __future__ import annotations

from benchcoach.config import FIELD_POSITION_COUNT


class LineupInputError(ValueError):
    """Raised when a generation request is malformed."""


class InsufficientPlayersError(LineupInputError):
    """Raised when fewer eligible players exist than field positions."""

    def __init__(self, available: int, required: int = FIELD_POSITION_COUNT):
        self.available = available
        self.required = required
        super().__init__(
            f"Need at least {required} eligible players to staff every field position, "
            f"got {available}."
        )


__all__ = ["LineupInputError", "InsufficientPlayersError"]
