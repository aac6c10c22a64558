"""Tabular lineup reports (pandas).

Key Functions:
    lineup_grid() - Player x inning grid of position codes
    playing_time_summary() - Per-player innings, bench and area counts

Key Classes:
    LineupFormatter - Console rendering used by the CLI

Usage:
    from benchcoach.analysis import lineup_grid, LineupFormatter

    grid = lineup_grid(lineup, players)
    grid.to_csv("lineup.csv")
    LineupFormatter(lineup, players).print()
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pandas as pd

from benchcoach.analysis.fair_play import categorize_issues, get_fair_play_issues
from benchcoach.analysis.queries import (
    infield_innings,
    innings_played,
    outfield_innings,
    positions_played,
)
from benchcoach.models.lineup import Lineup, Player
from benchcoach.models.positions import Position


def _inning_column(number: int) -> str:
    return f"inning_{number}"


def lineup_grid(lineup: Lineup, players: Sequence[Player]) -> pd.DataFrame:
    """One row per active player (roster order), one column per inning.

    Cells hold position codes; benched innings show "BN".
    """
    active = [p for p in players if p.active]
    rows = []
    for player in active:
        row = {"player_id": player.player_id, "player": player.display_name}
        for inning in lineup.innings:
            position = inning.position_of(player.player_id)
            row[_inning_column(inning.number)] = (position or Position.BENCH).value
        rows.append(row)

    columns = ["player_id", "player"] + [_inning_column(i.number) for i in lineup.innings]
    return pd.DataFrame(rows, columns=columns)


def playing_time_summary(lineup: Lineup, players: Sequence[Player]) -> pd.DataFrame:
    """Per-player playing time.

    Columns:
        player_id, player, innings_played, bench_innings, infield_innings,
        outfield_innings, distinct_positions, infield_pct
    """
    active = [p for p in players if p.active]
    df = pd.DataFrame(
        {
            "player_id": [p.player_id for p in active],
            "player": [p.display_name for p in active],
            "innings_played": [innings_played(lineup, p.player_id) for p in active],
            "infield_innings": [infield_innings(lineup, p.player_id) for p in active],
            "outfield_innings": [outfield_innings(lineup, p.player_id) for p in active],
            "distinct_positions": [len(positions_played(lineup, p.player_id)) for p in active],
        }
    )
    df["bench_innings"] = lineup.inning_count - df["innings_played"]
    df["infield_pct"] = np.where(
        df["innings_played"] > 0,
        100.0 * df["infield_innings"] / df["innings_played"].clip(lower=1),
        0.0,
    ).round(1)
    return df[
        [
            "player_id",
            "player",
            "innings_played",
            "bench_innings",
            "infield_innings",
            "outfield_innings",
            "distinct_positions",
            "infield_pct",
        ]
    ]


class LineupFormatter:
    """Console rendering of a lineup with diagnostics and fair play issues."""

    def __init__(self, lineup: Lineup, players: Sequence[Player], width: int = 70) -> None:
        self.lineup = lineup
        self.players = list(players)
        self.width = width

    def render(self) -> str:
        lines: List[str] = []
        lines.append("=" * self.width)
        lines.append(
            f"LINEUP {self.lineup.game_id} | {self.lineup.mode.value} | "
            f"{self.lineup.inning_count} innings"
        )
        lines.append("=" * self.width)

        grid = lineup_grid(self.lineup, self.players).drop(columns=["player_id"])
        grid.columns = ["Player"] + [str(i.number) for i in self.lineup.innings]
        lines.append(grid.to_string(index=False))

        diagnostics = self.lineup.diagnostics
        lines.append("-" * self.width)
        lines.append(f"Bench spread: {diagnostics.bench_spread}")
        if diagnostics.unsatisfiable_fairness:
            lines.append("  Bench time could not be spread evenly")
        for swap in diagnostics.repair_swaps:
            lines.append(
                f"  Repair: inning {swap.inning} {swap.player_in} -> {swap.position} "
                f"({swap.player_out} -> {swap.player_out_moved_to})"
            )
        for player_id in diagnostics.infield_shortfall:
            lines.append(f"  No infield inning for {player_id}")
        for degraded in diagnostics.degraded_assignments:
            lines.append(
                f"  Degraded: inning {degraded.inning} {degraded.position} "
                f"{degraded.player_id} ({degraded.reason})"
            )
        for number in diagnostics.forced_play_overflow:
            lines.append(f"  Inning {number}: more players owed a field spot than positions")

        grouped = categorize_issues(get_fair_play_issues(self.lineup, self.players))
        if grouped:
            lines.append("-" * self.width)
            lines.append("Fair play issues:")
            for category, issues in grouped.items():
                lines.append(f"  {category} ({len(issues)})")
                lines.extend(f"    • {issue}" for issue in issues)
        lines.append("=" * self.width)
        return "\n".join(lines)

    def print(self) -> None:
        print(self.render())
