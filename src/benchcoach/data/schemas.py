"""Pydantic schemas for lineup request validation.

Defines Pydantic models for the JSON payloads callers send in (roster
snapshot, fair play settings, saved template lineups). Both camelCase
keys and snake_case field names are accepted.

Models:
    PlayerSchema - Roster entry with position preferences
    FairPlaySettingsSchema - The four fair play toggles
    InningSchema - One inning of a saved lineup
    LineupSchema - Saved lineup used as a template
    LineupRequestSchema - Full generation request

Usage:
    from benchcoach.data.schemas import LineupRequestSchema

    request = LineupRequestSchema.model_validate(payload)
    lineup = generate_lineup(**request.to_domain())
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from benchcoach.config import DEFAULT_ASSIGNMENT_STRATEGY, DEFAULT_INNINGS
from benchcoach.models.lineup import (
    FairPlaySettings,
    Inning,
    Lineup,
    LineupMode,
    Player,
    make_lineup_id,
)
from benchcoach.models.positions import Position, parse_position


def _validate_codes(codes: List[str]) -> List[str]:
    for code in codes:
        parse_position(code)
    return codes


class PlayerSchema(BaseModel):
    """Roster player."""

    id: Union[str, int]
    jersey_number: int = Field(0, alias="jerseyNumber")
    primary_positions: List[str] = Field(default_factory=list, alias="primaryPositions")
    secondary_positions: List[str] = Field(default_factory=list, alias="secondaryPositions")
    active: bool = True
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")

    class Config:
        populate_by_name = True

    @field_validator("primary_positions", "secondary_positions")
    @classmethod
    def check_positions(cls, value: List[str]) -> List[str]:
        return _validate_codes(value)

    def to_domain(self) -> Player:
        return Player(
            player_id=str(self.id),
            jersey_number=self.jersey_number,
            primary_positions=tuple(self.primary_positions),
            secondary_positions=tuple(self.secondary_positions),
            active=self.active,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class FairPlaySettingsSchema(BaseModel):
    """Fair play toggles (all off unless sent)."""

    no_consecutive_bench: bool = Field(False, alias="noConsecutiveBench")
    no_double_before_all: bool = Field(False, alias="noDoubleBeforeAll")
    no_consecutive_game_bench: bool = Field(False, alias="noConsecutiveGameBench")
    at_least_one_infield: bool = Field(False, alias="atLeastOneInfield")

    class Config:
        populate_by_name = True

    def to_domain(self) -> FairPlaySettings:
        return FairPlaySettings(
            no_consecutive_bench=self.no_consecutive_bench,
            no_double_before_all=self.no_double_before_all,
            no_consecutive_game_bench=self.no_consecutive_game_bench,
            at_least_one_infield=self.at_least_one_infield,
        )


class PositionAssignmentSchema(BaseModel):
    """One position entry inside an inning."""

    position: str
    player_id: Optional[Union[str, int]] = Field(None, alias="playerId")

    class Config:
        populate_by_name = True

    @field_validator("position")
    @classmethod
    def check_position(cls, value: str) -> str:
        return parse_position(value).value


class InningSchema(BaseModel):
    """One inning of a saved lineup."""

    inning: int = 1
    positions: List[PositionAssignmentSchema] = Field(default_factory=list)

    def to_domain(self) -> Inning:
        assignments: Dict[Position, str] = {}
        for entry in self.positions:
            position = parse_position(entry.position)
            if entry.player_id in (None, "") or position is Position.BENCH:
                continue
            assignments[position] = str(entry.player_id)
        return Inning(number=self.inning, assignments=assignments)


class LineupSchema(BaseModel):
    """Saved lineup (template input)."""

    id: Optional[str] = None
    game_id: str = Field("", alias="gameId")
    team_id: str = Field("", alias="teamId")
    type: str = "standard"
    status: str = "draft"
    innings: List[InningSchema] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    def to_domain(self) -> Lineup:
        return Lineup(
            lineup_id=self.id or make_lineup_id(self.team_id, self.game_id),
            game_id=self.game_id,
            team_id=self.team_id,
            mode=LineupMode.parse(self.type),
            innings=[inning.to_domain() for inning in self.innings],
            status=self.status,
        )


class LineupRequestSchema(BaseModel):
    """Full lineup generation request."""

    game_id: str = Field(..., alias="gameId")
    team_id: str = Field(..., alias="teamId")
    innings: int = DEFAULT_INNINGS
    players: List[PlayerSchema]
    template_lineup: Optional[LineupSchema] = Field(None, alias="templateLineup")
    lineup_type: str = Field("standard", alias="lineupType")
    fair_play_settings: Optional[FairPlaySettingsSchema] = Field(None, alias="fairPlaySettings")
    previously_benched_players: List[Union[str, int]] = Field(
        default_factory=list, alias="previouslyBenchedPlayers"
    )
    position_history: Optional[Dict[str, List[str]]] = Field(None, alias="positionHistory")
    prioritize_continuity: bool = Field(True, alias="prioritizeContinuity")
    assignment_strategy: str = Field(DEFAULT_ASSIGNMENT_STRATEGY, alias="assignmentStrategy")

    class Config:
        populate_by_name = True

    @field_validator("lineup_type")
    @classmethod
    def check_lineup_type(cls, value: str) -> str:
        return LineupMode.parse(value).value

    @field_validator("position_history")
    @classmethod
    def check_history(cls, value: Optional[Dict[str, List[str]]]) -> Optional[Dict[str, List[str]]]:
        if value is not None:
            for codes in value.values():
                _validate_codes(codes)
        return value

    @property
    def active_players(self) -> List[PlayerSchema]:
        return [p for p in self.players if p.active]

    def to_domain(self) -> Dict[str, Any]:
        """Keyword arguments for generate_lineup(); inactive players dropped."""
        return {
            "game_id": self.game_id,
            "team_id": self.team_id,
            "inning_count": self.innings,
            "players": [p.to_domain() for p in self.active_players],
            "template_lineup": self.template_lineup.to_domain() if self.template_lineup else None,
            "mode": LineupMode.parse(self.lineup_type),
            "fair_play_settings": (
                self.fair_play_settings.to_domain() if self.fair_play_settings else None
            ),
            "previously_benched_player_ids": [str(pid) for pid in self.previously_benched_players],
            "position_history": self.position_history,
            "prioritize_continuity": self.prioritize_continuity,
            "assignment_strategy": self.assignment_strategy,
        }
