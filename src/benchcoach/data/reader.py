"""Read-only loaders for lineup requests.

Turns request files on disk into validated schemas. Nothing is written.

Key Methods:
    read_request() - Load and validate a JSON generation request
    read_roster_csv() - Load a roster CSV into PlayerSchema rows

Roster CSV columns:
    id, jersey_number, primary_positions, secondary_positions,
    active (optional), first_name (optional), last_name (optional)
    Position lists are separated by "|" or ",", e.g. "SS|2B".

Usage:
    from benchcoach.data import RequestReader

    reader = RequestReader("request.json", roster_csv="roster.csv")
    request = reader.read_request()
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Dict, List, Optional

import pandas as pd

from benchcoach.data.schemas import LineupRequestSchema, PlayerSchema

logger = logging.getLogger(__name__)

_LIST_SEPARATOR = re.compile(r"[|,;]")
_TRUE_VALUES = {"1", "true", "yes", "y"}


def _split_positions(raw: Any) -> List[str]:
    if raw is None or (isinstance(raw, float) and pd.isna(raw)):
        return []
    return [code.strip() for code in _LIST_SEPARATOR.split(str(raw)) if code.strip()]


def _parse_bool(raw: Any, default: bool = True) -> bool:
    if raw is None or (isinstance(raw, float) and pd.isna(raw)):
        return default
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in _TRUE_VALUES


class RequestReader:
    """Loads generation requests from JSON, optionally with a CSV roster."""

    def __init__(self, request_path: str, roster_csv: Optional[str] = None) -> None:
        if not os.path.exists(request_path):
            raise FileNotFoundError(f"Request file not found: {request_path}")
        if roster_csv is not None and not os.path.exists(roster_csv):
            raise FileNotFoundError(f"Roster file not found: {roster_csv}")
        self.request_path = request_path
        self.roster_csv = roster_csv

    def read_payload(self) -> Dict[str, Any]:
        """Raw JSON payload."""
        with open(self.request_path, encoding="utf-8") as fh:
            return json.load(fh)

    def read_request(self) -> LineupRequestSchema:
        """Load and validate the request.

        When a roster CSV was given, its rows replace the request's
        ``players`` list.

        Raises:
            pydantic.ValidationError: If the payload is malformed.
        """
        payload = self.read_payload()
        if self.roster_csv is not None:
            players = self.read_roster_csv()
            payload["players"] = [p.model_dump() for p in players]
            logger.info(f"Loaded {len(players)} players from {self.roster_csv}")
        return LineupRequestSchema.model_validate(payload)

    def read_roster_csv(self) -> List[PlayerSchema]:
        """Load the roster CSV in file order."""
        df = pd.read_csv(self.roster_csv, dtype=str)
        missing = {"id"} - set(df.columns)
        if missing:
            raise ValueError(f"Roster CSV missing columns: {sorted(missing)}")

        players = []
        for row in df.to_dict(orient="records"):
            jersey = row.get("jersey_number")
            players.append(
                PlayerSchema(
                    id=str(row["id"]),
                    jersey_number=0 if jersey is None or pd.isna(jersey) else int(jersey),
                    primary_positions=_split_positions(row.get("primary_positions")),
                    secondary_positions=_split_positions(row.get("secondary_positions")),
                    active=_parse_bool(row.get("active")),
                    first_name=_text(row.get("first_name")),
                    last_name=_text(row.get("last_name")),
                )
            )
        return players


def _text(raw: Any) -> str:
    if raw is None or (isinstance(raw, float) and pd.isna(raw)):
        return ""
    return str(raw)
