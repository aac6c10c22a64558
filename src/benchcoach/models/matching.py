"""Weighted bipartite assignment for one inning (PuLP LP).

Alternative to the greedy per-slot scorer: seats the open positions by
maximizing the total score across the inning, using the same score
function as edge weight.

Decision Rule:
    maximize Σ score(player, position) · x[player, position]
    subject to  each open position gets exactly one player (when enough
                players remain) and each player takes at most one position.

A small bonus of eps * i * j (i = roster index, j = position index) is
added to every weight. When scores tie, the maximum of sum(i * j) is the
pairing that seats players in roster order across positions in
declaration order, which is what the greedy path does.

Usage:
    from benchcoach.models.matching import solve_assignment

    seats = solve_assignment(player_ids, open_positions, scorer.score)
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Sequence

from pulp import (
    PULP_CBC_CMD,
    LpBinary,
    LpMaximize,
    LpProblem,
    LpStatus,
    LpVariable,
    lpSum,
    value,
)

from benchcoach.config import LP_TIE_BREAK_EPSILON
from benchcoach.models.positions import Position

logger = logging.getLogger(__name__)


def solve_assignment(
    player_ids: Sequence[str],
    positions: Sequence[Position],
    score: Callable[[str, Position], float],
) -> Dict[Position, str]:
    """Solve the inning assignment as an LP.

    Args:
        player_ids: Unassigned on-field players, roster order.
        positions: Open positions.
        score: Score function shared with the greedy scorer.

    Returns:
        Mapping of position -> player id. Positions without a player are
        omitted (only possible when players < positions).

    Raises:
        RuntimeError: If the solver does not report an optimal solution.
    """
    if not player_ids or not positions:
        return {}

    prob = LpProblem("InningAssignment", LpMaximize)

    # Variable names must be solver-safe; index by roster/position order
    x = {
        (i, j): LpVariable(f"x_{i}_{j}", cat=LpBinary)
        for i in range(len(player_ids))
        for j in range(len(positions))
    }

    weights = {
        (i, j): score(pid, pos) + LP_TIE_BREAK_EPSILON * i * j
        for i, pid in enumerate(player_ids)
        for j, pos in enumerate(positions)
    }

    prob += lpSum(weights[key] * var for key, var in x.items()), "TotalScore"

    seats_to_fill = min(len(player_ids), len(positions))
    for j in range(len(positions)):
        prob += lpSum(x[i, j] for i in range(len(player_ids))) <= 1, f"Position_{j}"
    for i in range(len(player_ids)):
        prob += lpSum(x[i, j] for j in range(len(positions))) <= 1, f"Player_{i}"
    prob += lpSum(x.values()) == seats_to_fill, "SeatsFilled"

    prob.solve(PULP_CBC_CMD(msg=False))

    status = LpStatus[prob.status]
    if status != "Optimal":
        raise RuntimeError(f"Inning assignment failed: {status}")

    seats: Dict[Position, str] = {}
    for (i, j), var in x.items():
        if value(var) > 0.5:
            seats[positions[j]] = player_ids[i]
    logger.debug(f"LP seated {len(seats)} of {len(positions)} open positions")
    return seats
