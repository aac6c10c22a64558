"""Bench selection for innings 2..N.

Decides who sits out each inning.

Rules:
    1. Players benched last inning must play (no_consecutive_bench).
    2. Field players at the minimum bench count have earned the next
       bench turns (no_double_before_all), up to the slots needed.
    3. Remaining slots go to a priority-ordered pick over the players
       not forced to play: ascending bench count (no_double_before_all),
       then, for competitive lineups in the first half of the game,
       later-declared players first, otherwise roster order.

Bench slots needed = eligible players - 9, constant for a fixed roster.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from benchcoach.config import FIELD_POSITION_COUNT
from benchcoach.models.fairness import FairnessState
from benchcoach.models.lineup import FairPlaySettings, LineupMode

logger = logging.getLogger(__name__)


@dataclass
class BenchDecision:
    """Outcome of bench selection for one inning.

    Attributes:
        on_field: Players who take the field, roster order.
        benched: Players who sit, roster order.
        forced_to_play: Players owed a field spot this inning.
        overflow: True when more players were owed a spot than exist.
    """

    on_field: List[str]
    benched: List[str]
    forced_to_play: List[str] = field(default_factory=list)
    overflow: bool = False


class BenchSelector:
    """Chooses the bench set for an inning."""

    def __init__(
        self,
        settings: FairPlaySettings,
        mode: LineupMode,
        total_innings: int,
    ) -> None:
        self.settings = settings
        self.mode = mode
        self.total_innings = total_innings

    def select(
        self,
        previous_field: Sequence[str],
        state: FairnessState,
        inning_number: int,
    ) -> BenchDecision:
        """Select who sits for ``inning_number``.

        Args:
            previous_field: Players on the field last inning.
            state: Fairness counters up to the previous inning.
            inning_number: The inning being built (2..N).
        """
        roster = state.roster
        on_field_prev = set(previous_field)
        benched_prev = [pid for pid in roster if pid not in on_field_prev]
        slots = max(0, len(roster) - FIELD_POSITION_COUNT)

        forced_to_play = list(benched_prev) if self.settings.no_consecutive_bench else []
        overflow = len(forced_to_play) > FIELD_POSITION_COUNT
        if overflow:
            forced_to_play = self._trim_forced(forced_to_play, state)
            logger.warning(
                f"Inning {inning_number}: {len(benched_prev)} players owed a field spot, "
                f"only {FIELD_POSITION_COUNT} positions"
            )

        if slots == 0:
            return BenchDecision(on_field=list(roster), benched=[], forced_to_play=forced_to_play)

        forced_set = set(forced_to_play)
        benched = self._earned_bench_turns(roster, on_field_prev, forced_set, state, slots)

        if len(benched) < slots:
            taken = set(benched)
            candidates = [pid for pid in roster if pid not in forced_set and pid not in taken]
            benched.extend(self._priority_pick(candidates, slots - len(benched), state, inning_number))

        bench_set = set(benched)
        return BenchDecision(
            on_field=[pid for pid in roster if pid not in bench_set],
            benched=[pid for pid in roster if pid in bench_set],
            forced_to_play=forced_to_play,
            overflow=overflow,
        )

    def _earned_bench_turns(
        self,
        roster: Sequence[str],
        on_field_prev: set,
        forced: set,
        state: FairnessState,
        slots: int,
    ) -> List[str]:
        """Field players at the minimum bench count go first.

        Players who sat last inning are never candidates, so once everyone
        has sat the same number of times the field players still earn the
        next turns.
        """
        if not self.settings.no_double_before_all:
            return []
        lowest = state.min_bench_count()
        earned = [
            pid
            for pid in roster
            if state.bench_counts[pid] == lowest and pid in on_field_prev and pid not in forced
        ]
        return earned[:slots]

    def _priority_pick(
        self,
        candidates: Sequence[str],
        count: int,
        state: FairnessState,
        inning_number: int,
    ) -> List[str]:
        if count <= 0:
            return []
        if count >= len(candidates):
            return list(candidates)

        bias_late = self.mode is LineupMode.COMPETITIVE and inning_number < self.total_innings / 2
        order = {pid: i for i, pid in enumerate(candidates)}

        def key(pid: str):
            bench = state.bench_counts[pid] if self.settings.no_double_before_all else 0
            roster_bias = -order[pid] if bias_late else 0
            return (bench, roster_bias)

        return sorted(candidates, key=key)[:count]

    @staticmethod
    def _trim_forced(forced: List[str], state: FairnessState) -> List[str]:
        """Keep the nine most-benched players when too many are owed a spot."""
        ranked = sorted(forced, key=lambda pid: -state.bench_counts[pid])
        keep = set(ranked[:FIELD_POSITION_COUNT])
        return [pid for pid in forced if pid in keep]
