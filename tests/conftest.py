"""Pytest fixtures/config for benchcoach tests."""

import os
import sys

import pytest

REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
SRC_PATH = os.path.join(REPO_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from benchcoach.models.lineup import Inning, Player  # noqa: E402
from benchcoach.models.positions import FIELD_POSITIONS  # noqa: E402

# (id, primary, secondary) - the first nine line up one per field position
ROSTER_PREFS = [
    ("p1", ["P"], ["1B"]),
    ("p2", ["C"], ["3B"]),
    ("p3", ["1B"], ["P"]),
    ("p4", ["2B"], ["SS"]),
    ("p5", ["3B"], ["C"]),
    ("p6", ["SS"], ["2B"]),
    ("p7", ["LF"], ["CF"]),
    ("p8", ["CF"], ["RF"]),
    ("p9", ["RF"], ["LF"]),
    ("p10", ["CF", "LF"], ["RF"]),
    ("p11", ["SS", "2B"], ["3B"]),
    ("p12", ["LF"], ["RF"]),
]


def build_players(n):
    """First ``n`` roster players; beyond twelve, players have no preferences."""
    players = []
    for i in range(n):
        if i < len(ROSTER_PREFS):
            pid, primary, secondary = ROSTER_PREFS[i]
        else:
            pid, primary, secondary = f"p{i + 1}", [], []
        players.append(
            Player(
                player_id=pid,
                jersey_number=i + 1,
                primary_positions=primary,
                secondary_positions=secondary,
                first_name="Player",
                last_name=str(i + 1),
            )
        )
    return players


def build_inning(number, player_ids):
    """Inning with ``player_ids`` seated in field-position declaration order."""
    return Inning(number=number, assignments=dict(zip(FIELD_POSITIONS, player_ids)))


@pytest.fixture
def make_players():
    return build_players


@pytest.fixture
def make_inning():
    return build_inning


@pytest.fixture
def nine_players():
    return build_players(9)


@pytest.fixture
def ten_players():
    return build_players(10)


@pytest.fixture
def twelve_players():
    return build_players(12)
