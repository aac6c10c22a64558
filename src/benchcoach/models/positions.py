"""Position taxonomy for baseball lineups.

Classifies the nine field positions (plus bench and DH) into the coarse
categories every fairness rule works with.

Key Objects:
    Position - Position codes (P, C, 1B ... RF, DH, BN)
    PositionType - pitcher / catcher / infield / outfield / bench / dh
    FIELD_POSITIONS - The nine field positions in declaration order

Note on "infield":
    is_infield() describes the infield *area* and includes the battery
    (P and C). The infield guarantee, the infield-need bonus and the
    same-area continuity bonus all use this predicate. position_type()
    keeps P and C in their own categories.

Usage:
    from benchcoach.models.positions import Position, is_infield

    is_infield(Position.SHORTSTOP)   # True
    position_type(Position.CATCHER)  # PositionType.CATCHER
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple


class Position(str, Enum):
    """Position codes."""

    PITCHER = "P"
    CATCHER = "C"
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SHORTSTOP = "SS"
    LEFT_FIELD = "LF"
    CENTER_FIELD = "CF"
    RIGHT_FIELD = "RF"
    DESIGNATED_HITTER = "DH"
    BENCH = "BN"

    def __str__(self) -> str:
        return self.value


class PositionType(str, Enum):
    """Coarse position categories."""

    PITCHER = "pitcher"
    CATCHER = "catcher"
    INFIELD = "infield"
    OUTFIELD = "outfield"
    BENCH = "bench"
    DH = "dh"


# Declaration order is also the fill order for every assignment pass
FIELD_POSITIONS: Tuple[Position, ...] = (
    Position.PITCHER,
    Position.CATCHER,
    Position.FIRST_BASE,
    Position.SECOND_BASE,
    Position.THIRD_BASE,
    Position.SHORTSTOP,
    Position.LEFT_FIELD,
    Position.CENTER_FIELD,
    Position.RIGHT_FIELD,
)

INFIELD_AREA = frozenset(FIELD_POSITIONS[:6])
OUTFIELD_AREA = frozenset(FIELD_POSITIONS[6:])

POSITION_NAMES: Dict[Position, str] = {
    Position.PITCHER: "Pitcher",
    Position.CATCHER: "Catcher",
    Position.FIRST_BASE: "First Base",
    Position.SECOND_BASE: "Second Base",
    Position.THIRD_BASE: "Third Base",
    Position.SHORTSTOP: "Shortstop",
    Position.LEFT_FIELD: "Left Field",
    Position.CENTER_FIELD: "Center Field",
    Position.RIGHT_FIELD: "Right Field",
    Position.DESIGNATED_HITTER: "Designated Hitter",
    Position.BENCH: "Bench",
}

_ALIASES = {"BENCH": Position.BENCH}


def parse_position(code: str | Position) -> Position:
    """Parse a position code (case-insensitive).

    Args:
        code: Position code such as "ss", "1B" or "BENCH".

    Returns:
        The matching Position.

    Raises:
        ValueError: If the code is not a known position.
    """
    if isinstance(code, Position):
        return code
    normalized = str(code).strip().upper()
    if normalized in _ALIASES:
        return _ALIASES[normalized]
    try:
        return Position(normalized)
    except ValueError:
        raise ValueError(f"Unknown position code: {code!r}") from None


def parse_positions(codes) -> Tuple[Position, ...]:
    """Parse an ordered collection of codes, dropping duplicates."""
    parsed: List[Position] = []
    for code in codes or ():
        pos = parse_position(code)
        if pos not in parsed:
            parsed.append(pos)
    return tuple(parsed)


def is_field_position(position: Position) -> bool:
    return position in FIELD_POSITIONS


def is_infield(position: Position) -> bool:
    return position in INFIELD_AREA


def is_outfield(position: Position) -> bool:
    return position in OUTFIELD_AREA


def is_pitcher(position: Position) -> bool:
    return position is Position.PITCHER


def is_catcher(position: Position) -> bool:
    return position is Position.CATCHER


def is_bench(position: Position) -> bool:
    return position is Position.BENCH


def position_type(position: Position) -> PositionType:
    """Return the category of a position."""
    if is_pitcher(position):
        return PositionType.PITCHER
    if is_catcher(position):
        return PositionType.CATCHER
    if is_infield(position):
        return PositionType.INFIELD
    if is_outfield(position):
        return PositionType.OUTFIELD
    if is_bench(position):
        return PositionType.BENCH
    return PositionType.DH


def same_area(a: Position, b: Position) -> bool:
    """True when both positions are infield, or both are outfield."""
    return (is_infield(a) and is_infield(b)) or (is_outfield(a) and is_outfield(b))
