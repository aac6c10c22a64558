"""Infield-guarantee repair pass.

Runs after every inning is generated. Each player who still has no
infield inning is swapped into the first infield slot (innings 2..N,
position declaration order) whose occupant has more than one infield
inning across the whole lineup. The two players trade positions, so
nobody's bench time changes; innings where the needy player sits are
skipped for the same reason.

Players that cannot be helped are returned as a shortfall, never retried.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from benchcoach.models.lineup import Inning, RepairSwap
from benchcoach.models.positions import FIELD_POSITIONS, is_infield

logger = logging.getLogger(__name__)

INFIELD_SLOTS = tuple(pos for pos in FIELD_POSITIONS if is_infield(pos))


def count_infield_innings(innings: Sequence[Inning], roster: Sequence[str]) -> Dict[str, int]:
    counts = {pid: 0 for pid in roster}
    for inning in innings:
        for player_id in inning.infield_player_ids():
            if player_id in counts:
                counts[player_id] += 1
    return counts


def repair_infield_guarantee(
    innings: List[Inning],
    roster: Sequence[str],
) -> Tuple[List[RepairSwap], List[str]]:
    """Give every player at least one infield inning where possible.

    Mutates ``innings`` in place.

    Args:
        innings: The generated innings, inning 1 first.
        roster: Eligible player ids in declaration order.

    Returns:
        Tuple of (swaps made, players still without an infield inning).
    """
    counts = count_infield_innings(innings, roster)
    needy = [pid for pid in roster if counts[pid] == 0]
    swaps: List[RepairSwap] = []
    shortfall: List[str] = []

    for player_id in needy:
        swap = _find_swap(innings, player_id, counts)
        if swap is None:
            shortfall.append(player_id)
            logger.warning(f"No infield swap available for {player_id}")
            continue
        swaps.append(swap)
        logger.debug(
            f"Inning {swap.inning}: {player_id} moves to {swap.position}, "
            f"{swap.player_out} to {swap.player_out_moved_to}"
        )

    return swaps, shortfall


def _find_swap(innings: List[Inning], player_id: str, counts: Dict[str, int]):
    for inning in innings[1:]:
        own_position = inning.position_of(player_id)
        if own_position is None:
            continue
        for position in INFIELD_SLOTS:
            occupant = inning.assignments.get(position)
            if not occupant or occupant == player_id or counts.get(occupant, 0) <= 1:
                continue
            inning.assignments[position] = player_id
            inning.assignments[own_position] = occupant
            counts[player_id] += 1
            counts[occupant] -= 1
            return RepairSwap(
                inning=inning.number,
                position=position,
                player_in=player_id,
                player_out=occupant,
                player_out_moved_to=own_position,
            )
    return None
