"""Position assignment for one inning.

Seats the on-field players into the nine field positions using a weighted
score per (player, position) pair:

    score = continuity + primary + secondary + experience + infield_need

    continuity   10*cf on an exact repeat of last inning's position,
                 5*cf on the same area (infield/outfield), else 0
    primary      7 * primary_factor[mode] * (1 - cf)
    secondary    5 * secondary_factor[mode] * (1 - cf)
    experience   developmental: 3*(1 - cf) for a never-played position
                 competitive:   min(3, times played)*(1 - cf)
    infield_need 15 when the infield guarantee is on, the slot is infield
                 and the player has no infield inning yet

cf is the continuity factor (see continuity_factor()).

With cf above HIGH_CONTINUITY_THRESHOLD, players still needing infield
time are seated in open infield slots first, then last inning's occupants
who are still on the field keep their positions. Every remaining slot goes
to the best-scoring unassigned player (ties: roster order). Slots where no
candidate scores above zero are filled last from whoever is left and
reported as degraded.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from benchcoach.config import (
    CONTINUITY_AREA_WEIGHT,
    CONTINUITY_CEILING,
    CONTINUITY_EXACT_WEIGHT,
    CONTINUITY_FLOOR,
    CONTINUITY_PRIORITIZED,
    CONTINUITY_RELAXED,
    DEFAULT_ASSIGNMENT_STRATEGY,
    EXPERIENCE_CAP,
    EXPERIENCE_WEIGHT,
    HIGH_CONTINUITY_THRESHOLD,
    INFIELD_NEED_BONUS,
    MODE_CONTINUITY_SHIFT,
    PRIMARY_FACTORS,
    PRIMARY_WEIGHT,
    SECONDARY_FACTORS,
    SECONDARY_WEIGHT,
)
from benchcoach.models.fairness import FairnessState
from benchcoach.models.lineup import DegradedAssignment, FairPlaySettings, Inning, LineupMode, Player
from benchcoach.models.matching import solve_assignment
from benchcoach.models.positions import FIELD_POSITIONS, Position, is_infield, same_area

logger = logging.getLogger(__name__)


def continuity_factor(mode: LineupMode, prioritize_continuity: bool = True) -> float:
    """Weight in [0, 1] for keeping players where they were.

    Base 0.7 when continuity is prioritized, else 0.3. Competitive lineups
    subtract 0.2 (floor 0.2); developmental lineups add 0.2 (ceiling 0.9).
    """
    factor = CONTINUITY_PRIORITIZED if prioritize_continuity else CONTINUITY_RELAXED
    if mode is LineupMode.COMPETITIVE:
        factor = max(CONTINUITY_FLOOR, factor - MODE_CONTINUITY_SHIFT)
    elif mode is LineupMode.DEVELOPMENTAL:
        factor = min(CONTINUITY_CEILING, factor + MODE_CONTINUITY_SHIFT)
    return factor


class PositionScorer:
    """Scores (player, position) pairs for one inning."""

    def __init__(
        self,
        players: Dict[str, Player],
        mode: LineupMode,
        continuity: float,
        state: FairnessState,
        previous_positions: Dict[str, Position],
        infield_guarantee: bool,
    ) -> None:
        self.players = players
        self.mode = mode
        self.continuity = continuity
        self.state = state
        self.previous_positions = previous_positions
        self.infield_guarantee = infield_guarantee
        self.primary_factor = PRIMARY_FACTORS[mode.value]
        self.secondary_factor = SECONDARY_FACTORS[mode.value]

    def continuity_bonus(self, player_id: str, position: Position) -> float:
        previous = self.previous_positions.get(player_id)
        if previous is None:
            return 0.0
        if previous == position:
            return CONTINUITY_EXACT_WEIGHT * self.continuity
        if same_area(previous, position):
            return CONTINUITY_AREA_WEIGHT * self.continuity
        return 0.0

    def preference_bonus(self, player: Player, position: Position) -> float:
        flexibility = 1 - self.continuity
        bonus = 0.0
        if player.is_primary(position):
            bonus += PRIMARY_WEIGHT * self.primary_factor * flexibility
        if player.is_secondary(position):
            bonus += SECONDARY_WEIGHT * self.secondary_factor * flexibility
        return bonus

    def experience_bonus(self, player_id: str, position: Position) -> float:
        played = self.state.history_count(player_id, position)
        flexibility = 1 - self.continuity
        if self.mode is LineupMode.DEVELOPMENTAL and played == 0:
            return EXPERIENCE_WEIGHT * flexibility
        if self.mode is LineupMode.COMPETITIVE and played > 0:
            return min(EXPERIENCE_CAP, played) * flexibility
        return 0.0

    def infield_need_bonus(self, player_id: str, position: Position) -> float:
        if self.infield_guarantee and is_infield(position) and self.state.needs_infield(player_id):
            return INFIELD_NEED_BONUS
        return 0.0

    def score(self, player_id: str, position: Position) -> float:
        player = self.players.get(player_id)
        if player is None:
            return 0.0
        return (
            self.continuity_bonus(player_id, position)
            + self.preference_bonus(player, position)
            + self.experience_bonus(player_id, position)
            + self.infield_need_bonus(player_id, position)
        )


class PositionAssigner:
    """Assigns on-field players to the nine field positions."""

    def __init__(
        self,
        players: Sequence[Player],
        settings: FairPlaySettings,
        mode: LineupMode,
        continuity: float,
        strategy: str = DEFAULT_ASSIGNMENT_STRATEGY,
    ) -> None:
        self.players = {p.player_id: p for p in players}
        self.settings = settings
        self.mode = mode
        self.continuity = continuity
        self.strategy = strategy

    @property
    def high_continuity(self) -> bool:
        return self.continuity > HIGH_CONTINUITY_THRESHOLD

    def scorer_for(self, previous: Inning, state: FairnessState) -> PositionScorer:
        previous_positions = {
            pid: pos for pos, pid in previous.assignments.items() if pos in FIELD_POSITIONS
        }
        return PositionScorer(
            players=self.players,
            mode=self.mode,
            continuity=self.continuity,
            state=state,
            previous_positions=previous_positions,
            infield_guarantee=self.settings.at_least_one_infield,
        )

    def assign(
        self,
        on_field: Sequence[str],
        previous: Inning,
        state: FairnessState,
        inning_number: int,
    ) -> Tuple[Inning, List[DegradedAssignment]]:
        """Build the inning for the given on-field players.

        Args:
            on_field: Players taking the field, roster order.
            previous: Last inning's assignment.
            state: Fairness counters up to the previous inning.
            inning_number: The inning being built.

        Returns:
            Tuple of (inning, degraded assignments).
        """
        inning = Inning(number=inning_number)
        dh_player = previous.assignments.get(Position.DESIGNATED_HITTER)
        if dh_player:
            inning.assignments[Position.DESIGNATED_HITTER] = dh_player

        assigned: set = set()
        if self.high_continuity:
            self._seat_infield_needs(inning, on_field, state, assigned)
            self._keep_previous_occupants(inning, on_field, previous, assigned)

        scorer = self.scorer_for(previous, state)
        degraded: List[DegradedAssignment] = []
        if self.strategy == "lp":
            degraded.extend(self._solve_matching(inning, on_field, scorer, assigned))
        else:
            self._score_open_positions(inning, on_field, scorer, assigned)
        degraded.extend(self._fallback_fill(inning, on_field, assigned))
        return inning, degraded

    def _seat_infield_needs(
        self,
        inning: Inning,
        on_field: Sequence[str],
        state: FairnessState,
        assigned: set,
    ) -> None:
        if not self.settings.at_least_one_infield:
            return
        needing = [pid for pid in on_field if state.needs_infield(pid)]
        for position in FIELD_POSITIONS:
            if not is_infield(position) or inning.assignments.get(position):
                continue
            player_id = next((pid for pid in needing if pid not in assigned), None)
            if player_id is None:
                return
            inning.assignments[position] = player_id
            assigned.add(player_id)

    @staticmethod
    def _keep_previous_occupants(
        inning: Inning,
        on_field: Sequence[str],
        previous: Inning,
        assigned: set,
    ) -> None:
        field_set = set(on_field)
        for position in FIELD_POSITIONS:
            if inning.assignments.get(position):
                continue
            occupant = previous.assignments.get(position)
            if occupant and occupant in field_set and occupant not in assigned:
                inning.assignments[position] = occupant
                assigned.add(occupant)

    @staticmethod
    def _score_open_positions(
        inning: Inning,
        on_field: Sequence[str],
        scorer: PositionScorer,
        assigned: set,
    ) -> None:
        for position in inning.open_positions():
            candidates = [pid for pid in on_field if pid not in assigned]
            if not candidates:
                return
            # max() keeps the first of equal scores, i.e. roster order
            best = max(candidates, key=lambda pid: scorer.score(pid, position))
            # Zero-score slots wait for _fallback_fill so later slots keep their picks
            if scorer.score(best, position) <= 0:
                continue
            inning.assignments[position] = best
            assigned.add(best)

    def _solve_matching(
        self,
        inning: Inning,
        on_field: Sequence[str],
        scorer: PositionScorer,
        assigned: set,
    ) -> List[DegradedAssignment]:
        open_positions = inning.open_positions()
        candidates = [pid for pid in on_field if pid not in assigned]
        if not open_positions or not candidates:
            return []
        seats = solve_assignment(candidates, open_positions, scorer.score)
        degraded: List[DegradedAssignment] = []
        for position in open_positions:
            player_id = seats.get(position)
            if player_id is None:
                continue
            inning.assignments[position] = player_id
            assigned.add(player_id)
            if scorer.score(player_id, position) <= 0:
                degraded.append(
                    DegradedAssignment(inning.number, position, player_id, reason="zero_score")
                )
        return degraded

    @staticmethod
    def _fallback_fill(
        inning: Inning,
        on_field: Sequence[str],
        assigned: set,
    ) -> List[DegradedAssignment]:
        degraded: List[DegradedAssignment] = []
        for position in inning.open_positions():
            player_id: Optional[str] = next((pid for pid in on_field if pid not in assigned), None)
            if player_id is None:
                break
            inning.assignments[position] = player_id
            assigned.add(player_id)
            degraded.append(DegradedAssignment(inning.number, position, player_id, reason="fallback"))
        if degraded:
            logger.warning(
                f"Inning {inning.number}: {len(degraded)} fallback seat(s) "
                f"({', '.join(str(d.position) for d in degraded)})"
            )
        return degraded
