"""Running fairness counters for one generation run.

FairnessState is created per call, threaded explicitly through every
inning step and discarded afterwards. It is never shared between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from benchcoach.models.lineup import Inning, LineupMode, Player
from benchcoach.models.positions import FIELD_POSITIONS, Position, is_infield


@dataclass
class FairnessState:
    """Per-player counters.

    Attributes:
        roster: Eligible player ids in declaration order.
        bench_counts: Innings benched so far.
        played_infield: Whether the player has logged an infield inning.
        position_history: Prior-game history (if used) followed by this
            run's field positions, oldest first.
    """

    roster: List[str]
    bench_counts: Dict[str, int] = field(default_factory=dict)
    played_infield: Dict[str, bool] = field(default_factory=dict)
    position_history: Dict[str, List[Position]] = field(default_factory=dict)

    @classmethod
    def start(
        cls,
        players: Sequence[Player],
        mode: LineupMode,
        prior_history: Optional[Mapping[str, Sequence[Position]]] = None,
    ) -> "FairnessState":
        """Create a fresh state.

        Prior-game history seeds variety scoring for standard and
        developmental lineups only; competitive runs start empty.
        """
        use_history = prior_history is not None and mode is not LineupMode.COMPETITIVE
        roster = [p.player_id for p in players]
        return cls(
            roster=roster,
            bench_counts={pid: 0 for pid in roster},
            played_infield={pid: False for pid in roster},
            position_history={
                pid: list(prior_history.get(pid, [])) if use_history else []
                for pid in roster
            },
        )

    def record_inning(self, inning: Inning) -> List[str]:
        """Update every counter from a finished inning.

        Returns:
            The players benched in that inning.
        """
        for position in FIELD_POSITIONS:
            player_id = inning.assignments.get(position)
            if not player_id or player_id not in self.bench_counts:
                continue
            self.position_history[player_id].append(position)
            if is_infield(position):
                self.played_infield[player_id] = True

        benched = inning.benched(self.roster)
        for player_id in benched:
            self.bench_counts[player_id] += 1
        return benched

    def history_count(self, player_id: str, position: Position) -> int:
        return sum(1 for p in self.position_history.get(player_id, []) if p == position)

    def needs_infield(self, player_id: str) -> bool:
        return not self.played_infield.get(player_id, False)

    def min_bench_count(self) -> int:
        return min(self.bench_counts.values()) if self.bench_counts else 0

    def bench_spread(self) -> int:
        if not self.bench_counts:
            return 0
        return max(self.bench_counts.values()) - min(self.bench_counts.values())
