"""Per-player queries over a finished lineup.

Used by the fair play checks and the reports.

Usage:
    from benchcoach.analysis.queries import benched_innings, infield_percentage

    benched_innings(lineup, "p7")        # [2, 5]
    infield_percentage(lineup, "p7")     # 50.0
"""

from __future__ import annotations

from typing import List

from benchcoach.models.lineup import Lineup, Player
from benchcoach.models.positions import Position, is_infield, is_outfield


def benched_innings(lineup: Lineup, player_id: str) -> List[int]:
    """Inning numbers in which the player holds no field position."""
    return [inning.number for inning in lineup.innings if inning.position_of(player_id) is None]


def innings_played(lineup: Lineup, player_id: str) -> int:
    return lineup.inning_count - len(benched_innings(lineup, player_id))


def consecutive_bench_innings(lineup: Lineup, player_id: str) -> int:
    """Longest run of back-to-back benched innings."""
    benched = benched_innings(lineup, player_id)
    if len(benched) <= 1:
        return len(benched)

    longest = current = 1
    for prev, cur in zip(benched, benched[1:]):
        current = current + 1 if cur == prev + 1 else 1
        longest = max(longest, current)
    return longest


def positions_played(lineup: Lineup, player_id: str) -> List[Position]:
    """Distinct field positions, in order of first appearance."""
    seen: List[Position] = []
    for inning in lineup.innings:
        position = inning.position_of(player_id)
        if position is not None and position not in seen:
            seen.append(position)
    return seen


def innings_at_position(lineup: Lineup, player_id: str, position: Position) -> int:
    return sum(1 for inning in lineup.innings if inning.assignments.get(position) == player_id)


def _field_positions(lineup: Lineup, player_id: str) -> List[Position]:
    positions = (inning.position_of(player_id) for inning in lineup.innings)
    return [pos for pos in positions if pos is not None]


def infield_innings(lineup: Lineup, player_id: str) -> int:
    return sum(1 for pos in _field_positions(lineup, player_id) if is_infield(pos))


def outfield_innings(lineup: Lineup, player_id: str) -> int:
    return sum(1 for pos in _field_positions(lineup, player_id) if is_outfield(pos))


def infield_percentage(lineup: Lineup, player_id: str) -> float:
    """Share of the player's field innings spent in the infield, 0-100."""
    played = innings_played(lineup, player_id)
    if played == 0:
        return 0.0
    return infield_innings(lineup, player_id) / played * 100


def position_label_for_player(player: Player, position: Position) -> str:
    """'primary', 'secondary' or 'new'."""
    if player.is_primary(position):
        return "primary"
    if player.is_secondary(position):
        return "secondary"
    return "new"
