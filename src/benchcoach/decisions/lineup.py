"""Lineup decision function.

Decision Rule:
    Greedy per-inning scoring (default) or per-inning LP ("lp"), with the
    fair play rules enforced by the bench selector and the infield repair
    pass. Deterministic: identical inputs give identical output.

Callers load the roster, template and history themselves and hand them in
as plain values. Nothing here touches a datastore.

Usage:
    from benchcoach.decisions import generate_lineup

    lineup = generate_lineup("g1", "t1", 6, players, fair_play_settings=FairPlaySettings.all_enabled())
    for inning in lineup.innings:
        print(inning.to_dict())
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from benchcoach.config import DEFAULT_ASSIGNMENT_STRATEGY
from benchcoach.data.schemas import LineupRequestSchema
from benchcoach.models.generator import LineupGenerator
from benchcoach.models.lineup import FairPlaySettings, Lineup, LineupMode, Player
from benchcoach.models.positions import Position

logger = logging.getLogger(__name__)


def generate_lineup(
    game_id: str,
    team_id: str,
    inning_count: int,
    players: Sequence[Player],
    template_lineup: Optional[Lineup] = None,
    mode: LineupMode | str = LineupMode.STANDARD,
    fair_play_settings: Optional[FairPlaySettings] = None,
    previously_benched_player_ids: Optional[Sequence[str]] = None,
    position_history: Optional[Mapping[str, Sequence[Position | str]]] = None,
    prioritize_continuity: bool = True,
    assignment_strategy: str = DEFAULT_ASSIGNMENT_STRATEGY,
) -> Lineup:
    """Generate a complete lineup for one game.

    Args:
        game_id: Game reference.
        team_id: Team reference.
        inning_count: Number of innings to generate.
        players: Eligible roster in declaration order. Inactive players are
            skipped.
        template_lineup: Saved lineup; only its first inning is consulted.
        mode: "standard", "competitive" or "developmental".
        fair_play_settings: Fair play rules. None disables fair play and
            repeats inning 1 for every inning.
        previously_benched_player_ids: Players who started the previous game
            on the bench.
        position_history: Prior field positions per player, oldest first.
            Ignored for competitive lineups.
        prioritize_continuity: Prefer keeping players in their positions.
        assignment_strategy: "greedy" or "lp".

    Returns:
        The generated Lineup. Soft failures are in ``lineup.diagnostics``.

    Raises:
        InsufficientPlayersError: Fewer than nine eligible players.
        LineupInputError: Malformed request.
    """
    generator = LineupGenerator(
        game_id=game_id,
        team_id=team_id,
        inning_count=inning_count,
        players=players,
        mode=mode,
        fair_play=fair_play_settings,
        template=template_lineup,
        previously_benched=previously_benched_player_ids,
        position_history=position_history,
        prioritize_continuity=prioritize_continuity,
        assignment_strategy=assignment_strategy,
    )
    return generator.generate()


def build_lineup_from_request(request: LineupRequestSchema | dict) -> Lineup:
    """Generate a lineup from a request payload.

    Args:
        request: A validated LineupRequestSchema or a raw camelCase dict.

    Returns:
        The generated Lineup.
    """
    if not isinstance(request, LineupRequestSchema):
        request = LineupRequestSchema.model_validate(request)

    kwargs = request.to_domain()
    logger.debug(f"Request for game {kwargs['game_id']} parsed: {len(kwargs['players'])} active players")
    return generate_lineup(**kwargs)
