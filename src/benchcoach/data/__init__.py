"""Data module - request loading and schemas.

Public API:
    RequestReader - JSON request / CSV roster loader
    PlayerSchema, LineupRequestSchema, etc. - Pydantic models
"""

from benchcoach.data.reader import RequestReader
from benchcoach.data.schemas import (
    FairPlaySettingsSchema,
    InningSchema,
    LineupRequestSchema,
    LineupSchema,
    PlayerSchema,
    PositionAssignmentSchema,
)

__all__ = [
    "RequestReader",
    "PlayerSchema",
    "FairPlaySettingsSchema",
    "PositionAssignmentSchema",
    "InningSchema",
    "LineupSchema",
    "LineupRequestSchema",
]
