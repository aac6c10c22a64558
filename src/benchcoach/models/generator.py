"""Lineup generator.

Pure function of its inputs: roster snapshot, settings and optional
template/history in, completed Lineup out. No I/O, no randomness.

Pipeline:
    roster + settings
        -> FirstInningInitializer
        -> for innings 2..N: BenchSelector -> PositionAssigner
           (FairnessState updated after every inning)
        -> infield repair pass
        -> Lineup (+ GenerationDiagnostics)

Without fair play settings the first inning is cloned to every inning.

Key Classes:
    LineupGenerator - Orchestrates one generation run

Usage:
    from benchcoach.models import LineupGenerator

    generator = LineupGenerator("g1", "t1", 6, players, fair_play=FairPlaySettings.all_enabled())
    lineup = generator.generate()
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from benchcoach.config import (
    ASSIGNMENT_STRATEGIES,
    DEFAULT_ASSIGNMENT_STRATEGY,
    FIELD_POSITION_COUNT,
    MAX_INNINGS,
    MAX_ROSTER_SIZE,
)
from benchcoach.models.assigner import PositionAssigner, continuity_factor
from benchcoach.models.bench import BenchSelector
from benchcoach.models.errors import InsufficientPlayersError, LineupInputError
from benchcoach.models.fairness import FairnessState
from benchcoach.models.first_inning import FirstInningInitializer
from benchcoach.models.lineup import (
    FairPlaySettings,
    GenerationDiagnostics,
    Inning,
    Lineup,
    LineupMode,
    Player,
    make_lineup_id,
)
from benchcoach.models.positions import Position, parse_position
from benchcoach.models.repair import repair_infield_guarantee

logger = logging.getLogger(__name__)


class LineupGenerator:
    """Generates a multi-inning lineup with fair play rules applied."""

    def __init__(
        self,
        game_id: str,
        team_id: str,
        inning_count: int,
        players: Sequence[Player],
        mode: LineupMode | str = LineupMode.STANDARD,
        fair_play: Optional[FairPlaySettings] = None,
        template: Optional[Lineup] = None,
        previously_benched: Optional[Sequence[str]] = None,
        position_history: Optional[Mapping[str, Sequence[Position | str]]] = None,
        prioritize_continuity: bool = True,
        assignment_strategy: str = DEFAULT_ASSIGNMENT_STRATEGY,
    ) -> None:
        """Initialize generator and validate inputs.

        Args:
            game_id: Game the lineup belongs to.
            team_id: Team the lineup belongs to.
            inning_count: Number of innings (1..MAX_INNINGS).
            players: Roster snapshot; inactive players are ignored.
            mode: standard, competitive or developmental.
            fair_play: Fair play settings, None disables fair play.
            template: Saved lineup whose first inning seeds this run.
            previously_benched: Players who started the last game benched.
            position_history: Prior-game field positions per player.
            prioritize_continuity: Prefer keeping players in place.
            assignment_strategy: "greedy" or "lp".

        Raises:
            InsufficientPlayersError: Fewer than nine eligible players.
            LineupInputError: Any other malformed input.
        """
        self.game_id = game_id
        self.team_id = team_id
        self.inning_count = inning_count
        self.mode = LineupMode.parse(mode)
        self.fair_play = fair_play
        self.template = template
        self.previously_benched = list(previously_benched or [])
        self.prioritize_continuity = prioritize_continuity
        self.assignment_strategy = assignment_strategy
        self.players = [p for p in players if p.active]
        self.position_history = self._parse_history(position_history)

        self._validate()

    def _validate(self) -> None:
        if not 1 <= self.inning_count <= MAX_INNINGS:
            raise LineupInputError(
                f"Inning count must be between 1 and {MAX_INNINGS}, got {self.inning_count}"
            )
        if self.assignment_strategy not in ASSIGNMENT_STRATEGIES:
            raise LineupInputError(
                f"Unknown assignment strategy {self.assignment_strategy!r}; "
                f"expected one of {ASSIGNMENT_STRATEGIES}"
            )
        ids = [p.player_id for p in self.players]
        duplicates = sorted({pid for pid in ids if ids.count(pid) > 1})
        if duplicates:
            raise LineupInputError(f"Duplicate player ids in roster: {duplicates}")
        if len(ids) > MAX_ROSTER_SIZE:
            raise LineupInputError(f"Roster of {len(ids)} exceeds the limit of {MAX_ROSTER_SIZE}")
        if len(ids) < FIELD_POSITION_COUNT:
            raise InsufficientPlayersError(available=len(ids))

    @staticmethod
    def _parse_history(
        history: Optional[Mapping[str, Sequence[Position | str]]],
    ) -> Optional[Dict[str, List[Position]]]:
        if history is None:
            return None
        return {pid: [parse_position(p) for p in positions] for pid, positions in history.items()}

    def generate(self) -> Lineup:
        """Run the generation pipeline.

        Returns:
            Completed Lineup with diagnostics attached.
        """
        logger.info(
            f"Generating {self.mode.value} lineup for game {self.game_id}: "
            f"{len(self.players)} players, {self.inning_count} innings, "
            f"fair play {'on' if self.fair_play else 'off'}"
        )
        diagnostics = GenerationDiagnostics()
        state = FairnessState.start(self.players, self.mode, self.position_history)

        if self.fair_play is None:
            innings = self._static_innings(state)
        else:
            innings = self._fair_play_innings(state, diagnostics)

        diagnostics.bench_counts = dict(state.bench_counts)
        diagnostics.bench_spread = state.bench_spread()
        if self.fair_play and self.fair_play.no_double_before_all and diagnostics.bench_spread > 1:
            diagnostics.unsatisfiable_fairness = True
            logger.warning(
                f"Bench time could not be spread evenly (spread {diagnostics.bench_spread})"
            )

        lineup = Lineup(
            lineup_id=make_lineup_id(self.team_id, self.game_id),
            game_id=self.game_id,
            team_id=self.team_id,
            mode=self.mode,
            innings=innings,
            diagnostics=diagnostics,
        )
        logger.info(
            f"Lineup {lineup.lineup_id} ready: bench spread {diagnostics.bench_spread}, "
            f"{len(diagnostics.repair_swaps)} repair swap(s)"
        )
        return lineup

    def _static_innings(self, state: FairnessState) -> List[Inning]:
        first = FirstInningInitializer(self.players).build(self.template)
        innings = [first] + [first.copy(number=n) for n in range(2, self.inning_count + 1)]
        for inning in innings:
            state.record_inning(inning)
        return innings

    def _fair_play_innings(
        self,
        state: FairnessState,
        diagnostics: GenerationDiagnostics,
    ) -> List[Inning]:
        settings = self.fair_play
        initializer = FirstInningInitializer(self.players, settings, self.previously_benched)
        first = initializer.build(self.template)
        diagnostics.first_inning_swaps.extend(initializer.swaps)
        state.record_inning(first)
        innings = [first]

        continuity = continuity_factor(self.mode, self.prioritize_continuity)
        selector = BenchSelector(settings, self.mode, self.inning_count)
        assigner = PositionAssigner(
            self.players, settings, self.mode, continuity, self.assignment_strategy
        )

        for number in range(2, self.inning_count + 1):
            previous = innings[-1]
            decision = selector.select(previous.field_player_ids(), state, number)
            if decision.overflow:
                diagnostics.forced_play_overflow.append(number)
            inning, degraded = assigner.assign(decision.on_field, previous, state, number)
            diagnostics.degraded_assignments.extend(degraded)
            state.record_inning(inning)
            innings.append(inning)
            logger.debug(f"Inning {number}: benched {decision.benched}")

        if settings.at_least_one_infield:
            swaps, shortfall = repair_infield_guarantee(innings, state.roster)
            diagnostics.repair_swaps.extend(swaps)
            diagnostics.infield_shortfall.extend(shortfall)

        return innings
