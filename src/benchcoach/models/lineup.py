"""Domain types for lineup generation.

Inputs (Player, FairPlaySettings, LineupMode) are immutable for the
duration of a run. Outputs (Inning, Lineup, GenerationDiagnostics) are
plain dataclasses that convert to JSON-serialisable dicts.

Key Classes:
    Player - Roster entry with ordered position preferences
    FairPlaySettings - The four independent fairness rules
    LineupMode - standard / competitive / developmental
    Inning - Position -> player id mapping for one inning
    Lineup - Completed multi-inning lineup with diagnostics
    GenerationDiagnostics - Soft failures surfaced to the caller
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from benchcoach.models.positions import (
    FIELD_POSITIONS,
    Position,
    is_infield,
    parse_position,
    parse_positions,
)


class LineupMode(str, Enum):
    """Lineup type chosen by the coach."""

    STANDARD = "standard"
    COMPETITIVE = "competitive"
    DEVELOPMENTAL = "developmental"

    @classmethod
    def parse(cls, value: "str | LineupMode | None") -> "LineupMode":
        if value is None:
            return cls.STANDARD
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown lineup mode: {value!r}") from None


@dataclass(frozen=True)
class Player:
    """A roster player.

    Attributes:
        player_id: Unique identifier.
        jersey_number: Jersey number.
        primary_positions: Preferred positions, most preferred first.
        secondary_positions: Acceptable positions.
        active: Inactive players are never eligible.
        first_name: Optional display name.
        last_name: Optional display name.
    """

    player_id: str
    jersey_number: int = 0
    primary_positions: Tuple[Position, ...] = ()
    secondary_positions: Tuple[Position, ...] = ()
    active: bool = True
    first_name: str = ""
    last_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "primary_positions", parse_positions(self.primary_positions))
        object.__setattr__(self, "secondary_positions", parse_positions(self.secondary_positions))

    @property
    def display_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip() or self.player_id
        return f"{name} (#{self.jersey_number})"

    def is_primary(self, position: Position) -> bool:
        return position in self.primary_positions

    def is_secondary(self, position: Position) -> bool:
        return position in self.secondary_positions


@dataclass(frozen=True)
class FairPlaySettings:
    """Fair play rules. Any subset may be enabled.

    Attributes:
        no_consecutive_bench: No player sits out two innings in a row.
        no_double_before_all: No player sits twice until everyone sits once.
        no_consecutive_game_bench: No player starts on the bench in consecutive games.
        at_least_one_infield: Each player gets at least one infield inning.
    """

    no_consecutive_bench: bool = False
    no_double_before_all: bool = False
    no_consecutive_game_bench: bool = False
    at_least_one_infield: bool = False

    @classmethod
    def all_enabled(cls) -> "FairPlaySettings":
        return cls(True, True, True, True)

    def to_dict(self) -> dict:
        return {
            "no_consecutive_bench": self.no_consecutive_bench,
            "no_double_before_all": self.no_double_before_all,
            "no_consecutive_game_bench": self.no_consecutive_game_bench,
            "at_least_one_infield": self.at_least_one_infield,
        }


@dataclass
class Inning:
    """Assignments for a single inning.

    A player absent from every field position is implicitly benched.
    """

    number: int
    assignments: Dict[Position, str] = field(default_factory=dict)

    def player_at(self, position: Position) -> Optional[str]:
        return self.assignments.get(position)

    def position_of(self, player_id: str) -> Optional[Position]:
        for position in FIELD_POSITIONS:
            if self.assignments.get(position) == player_id:
                return position
        return None

    def field_player_ids(self) -> List[str]:
        """Players on the field, in position declaration order."""
        return [self.assignments[pos] for pos in FIELD_POSITIONS if self.assignments.get(pos)]

    def open_positions(self) -> List[Position]:
        return [pos for pos in FIELD_POSITIONS if not self.assignments.get(pos)]

    def benched(self, roster_ids: Iterable[str]) -> List[str]:
        on_field = set(self.field_player_ids())
        return [pid for pid in roster_ids if pid not in on_field]

    def infield_player_ids(self) -> List[str]:
        return [
            self.assignments[pos]
            for pos in FIELD_POSITIONS
            if is_infield(pos) and self.assignments.get(pos)
        ]

    def copy(self, number: Optional[int] = None) -> "Inning":
        return Inning(number=self.number if number is None else number, assignments=dict(self.assignments))

    def to_dict(self) -> dict:
        ordered = [pos for pos in FIELD_POSITIONS] + [Position.DESIGNATED_HITTER]
        return {
            "inning": self.number,
            "positions": [
                {"position": pos.value, "player_id": self.assignments[pos]}
                for pos in ordered
                if self.assignments.get(pos)
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Inning":
        """Build an inning from ``{"inning": n, "positions": [...]}``.

        ``positions`` may be a list of ``{"position", "player_id"}`` entries
        (``playerId`` is accepted too) or a plain ``{position: player_id}`` map.
        Empty player ids and bench entries are skipped.
        """
        raw = data.get("positions", {})
        if isinstance(raw, dict):
            pairs = list(raw.items())
        else:
            pairs = [(e.get("position"), e.get("player_id", e.get("playerId"))) for e in raw]
        assignments: Dict[Position, str] = {}
        for code, player_id in pairs:
            pos = parse_position(code)
            if not player_id or pos is Position.BENCH:
                continue
            assignments[pos] = str(player_id)
        return cls(number=int(data.get("inning", 1)), assignments=assignments)


@dataclass(frozen=True)
class RepairSwap:
    """One infield-guarantee correction."""

    inning: int
    position: Position
    player_in: str
    player_out: str
    player_out_moved_to: Optional[Position] = None

    def to_dict(self) -> dict:
        return {
            "inning": self.inning,
            "position": self.position.value,
            "player_in": self.player_in,
            "player_out": self.player_out,
            "player_out_moved_to": self.player_out_moved_to.value if self.player_out_moved_to else None,
        }


@dataclass(frozen=True)
class DegradedAssignment:
    """A seat filled without any positive score (fallback fill)."""

    inning: int
    position: Position
    player_id: str
    reason: str = "fallback"

    def to_dict(self) -> dict:
        return {
            "inning": self.inning,
            "position": self.position.value,
            "player_id": self.player_id,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class TemplateSwap:
    """Consecutive-game-bench adjustment applied to a template's first inning."""

    position: Position
    player_in: str
    player_out: str

    def to_dict(self) -> dict:
        return {"position": self.position.value, "player_in": self.player_in, "player_out": self.player_out}


@dataclass
class GenerationDiagnostics:
    """Soft failures and fairness measurements from a generation run.

    Attributes:
        bench_counts: Innings benched per eligible player.
        bench_spread: max - min of bench_counts.
        unsatisfiable_fairness: True when no_double_before_all was on but the
            spread still exceeds 1.
        infield_shortfall: Players left without an infield inning.
        repair_swaps: Corrections made by the repair pass.
        degraded_assignments: Fallback seats.
        first_inning_swaps: Template adjustments for consecutive-game bench.
        forced_play_overflow: Innings where more players were owed a field
            spot than there are positions.
    """

    bench_counts: Dict[str, int] = field(default_factory=dict)
    bench_spread: int = 0
    unsatisfiable_fairness: bool = False
    infield_shortfall: List[str] = field(default_factory=list)
    repair_swaps: List[RepairSwap] = field(default_factory=list)
    degraded_assignments: List[DegradedAssignment] = field(default_factory=list)
    first_inning_swaps: List[TemplateSwap] = field(default_factory=list)
    forced_play_overflow: List[int] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(
            self.unsatisfiable_fairness
            or self.infield_shortfall
            or self.degraded_assignments
            or self.forced_play_overflow
        )

    def to_dict(self) -> dict:
        return {
            "bench_counts": dict(self.bench_counts),
            "bench_spread": self.bench_spread,
            "unsatisfiable_fairness": self.unsatisfiable_fairness,
            "infield_shortfall": list(self.infield_shortfall),
            "repair_swaps": [s.to_dict() for s in self.repair_swaps],
            "degraded_assignments": [d.to_dict() for d in self.degraded_assignments],
            "first_inning_swaps": [s.to_dict() for s in self.first_inning_swaps],
            "forced_play_overflow": list(self.forced_play_overflow),
        }


def make_lineup_id(team_id: str, game_id: str) -> str:
    """Deterministic lineup id so identical requests give identical output."""
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"benchcoach:{team_id}:{game_id}"))


@dataclass
class Lineup:
    """A completed game lineup."""

    lineup_id: str
    game_id: str
    team_id: str
    mode: LineupMode
    innings: List[Inning]
    status: str = "draft"
    diagnostics: GenerationDiagnostics = field(default_factory=GenerationDiagnostics)

    @property
    def inning_count(self) -> int:
        return len(self.innings)

    def inning(self, number: int) -> Inning:
        return self.innings[number - 1]

    def to_dict(self) -> dict:
        return {
            "id": self.lineup_id,
            "game_id": self.game_id,
            "team_id": self.team_id,
            "type": self.mode.value,
            "status": self.status,
            "innings": [inning.to_dict() for inning in self.innings],
            "diagnostics": self.diagnostics.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Lineup":
        """Rebuild a saved lineup (diagnostics are not restored)."""
        team_id = str(data.get("team_id", data.get("teamId", "")))
        game_id = str(data.get("game_id", data.get("gameId", "")))
        return cls(
            lineup_id=str(data.get("id") or make_lineup_id(team_id, game_id)),
            game_id=game_id,
            team_id=team_id,
            mode=LineupMode.parse(data.get("type")),
            innings=[Inning.from_dict(i) for i in data.get("innings", [])],
            status=str(data.get("status", "draft")),
        )
