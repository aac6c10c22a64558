"""Lineup decision functions.

Both the CLI script and library callers go through these functions.

Decision Contract:
- Bench: forced-to-play, earned bench turns, then priority pick
- Positions: weighted score per (player, position), greedy or LP
- Infield guarantee: post-generation swap repair
"""

from .lineup import build_lineup_from_request, generate_lineup

__all__ = [
    "generate_lineup",
    "build_lineup_from_request",
]
