"""First-inning initializer.

Builds inning 1 either by adapting a template lineup or by greedy
preference matching from scratch.

Template path:
    Copy the template's first inning. When the consecutive-game-bench rule
    is on, every player benched in both the template and the previous
    game's opening inning is swapped in for the first fielded player (in
    position declaration order) who was not benched last game. One swap
    per conflict, best effort.

Scratch path:
    Sort the roster (previously benched first when the rule is on, then by
    descending primary-position count) and fill the nine positions in three
    passes: primary match, secondary match, anyone.

Both paths finish with the same three-pass fill so inning 1 is fully
staffed whenever nine eligible players exist.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from benchcoach.models.lineup import FairPlaySettings, Inning, Lineup, Player, TemplateSwap
from benchcoach.models.positions import FIELD_POSITIONS, Position

logger = logging.getLogger(__name__)


class FirstInningInitializer:
    """Builds the inning-1 assignment for a run."""

    def __init__(
        self,
        players: Sequence[Player],
        settings: Optional[FairPlaySettings] = None,
        previously_benched: Optional[Sequence[str]] = None,
    ) -> None:
        """Initialize.

        Args:
            players: Eligible players in roster declaration order.
            settings: Fair play settings, or None when fair play is off.
            previously_benched: Players who started the previous game on
                the bench.
        """
        self.players = list(players)
        self.by_id: Dict[str, Player] = {p.player_id: p for p in self.players}
        self.settings = settings
        self.previously_benched = set(previously_benched or [])
        self.swaps: List[TemplateSwap] = []

    @property
    def _guard_consecutive_game_bench(self) -> bool:
        return bool(
            self.settings
            and self.settings.no_consecutive_game_bench
            and self.previously_benched
        )

    def build(self, template: Optional[Lineup] = None) -> Inning:
        """Return the inning-1 assignment."""
        if template is not None and template.innings:
            inning = self._from_template(template.innings[0])
        else:
            inning = Inning(number=1)
        self._fill_open_positions(inning, self._priority_order())
        return inning

    def _from_template(self, template_inning: Inning) -> Inning:
        assignments: Dict[Position, str] = {}
        used = set()
        for position in FIELD_POSITIONS:
            player_id = template_inning.assignments.get(position)
            if not player_id:
                continue
            if player_id not in self.by_id:
                logger.warning(f"Template player {player_id} at {position} is not eligible; slot reopened")
                continue
            if player_id in used:
                logger.warning(f"Template lists {player_id} twice; keeping the first slot only")
                continue
            assignments[position] = player_id
            used.add(player_id)

        dh_player = template_inning.assignments.get(Position.DESIGNATED_HITTER)
        if dh_player and dh_player in self.by_id:
            assignments[Position.DESIGNATED_HITTER] = dh_player

        inning = Inning(number=1, assignments=assignments)
        if self._guard_consecutive_game_bench:
            self._swap_double_benched(inning)
        return inning

    def _swap_double_benched(self, inning: Inning) -> None:
        benched = inning.benched(self.by_id)
        double_benched = [pid for pid in benched if pid in self.previously_benched]
        for benched_id in double_benched:
            slot = self._first_swappable_slot(inning)
            if slot is None:
                logger.warning(f"No field slot available to start {benched_id}; left on bench")
                continue
            player_out = inning.assignments[slot]
            inning.assignments[slot] = benched_id
            self.swaps.append(TemplateSwap(position=slot, player_in=benched_id, player_out=player_out))
            logger.debug(f"Consecutive-game bench swap at {slot}: {benched_id} in, {player_out} out")

    def _first_swappable_slot(self, inning: Inning) -> Optional[Position]:
        # Swapped-in players were previously benched, so they are never displaced again
        for position in FIELD_POSITIONS:
            occupant = inning.assignments.get(position)
            if occupant and occupant not in self.previously_benched:
                return position
        return None

    def _priority_order(self) -> List[Player]:
        guard = self._guard_consecutive_game_bench

        def key(player: Player) -> Tuple[int, int]:
            benched_first = 0 if guard and player.player_id in self.previously_benched else 1
            return (benched_first, -len(player.primary_positions))

        return sorted(self.players, key=key)

    @staticmethod
    def _fill_open_positions(inning: Inning, ordered: Sequence[Player]) -> None:
        """Primary pass, secondary pass, then anyone left."""
        assigned = set(inning.field_player_ids())
        passes = (
            lambda p, pos: p.is_primary(pos),
            lambda p, pos: p.is_secondary(pos),
            lambda p, pos: True,
        )
        for matches in passes:
            for position in FIELD_POSITIONS:
                if inning.assignments.get(position):
                    continue
                player = next(
                    (p for p in ordered if p.player_id not in assigned and matches(p, position)),
                    None,
                )
                if player is not None:
                    inning.assignments[position] = player.player_id
                    assigned.add(player.player_id)


def build_first_inning(
    players: Sequence[Player],
    template: Optional[Lineup] = None,
    settings: Optional[FairPlaySettings] = None,
    previously_benched: Optional[Sequence[str]] = None,
) -> Tuple[Inning, List[TemplateSwap]]:
    """Convenience function returning the inning and any template swaps."""
    initializer = FirstInningInitializer(players, settings, previously_benched)
    inning = initializer.build(template)
    return inning, initializer.swaps
