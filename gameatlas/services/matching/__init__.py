"""
Match engine building blocks.

`scorer` holds the pure scoring/ranking functions; `mapper` turns ranked
results into response payloads for `MatchService`.
"""

from .mapper import game_match_to_dict, to_game_match
from .scorer import DEFAULT_WEIGHTS, overlap, rank_matches, score_match

__all__ = [
    "DEFAULT_WEIGHTS",
    "game_match_to_dict",
    "overlap",
    "rank_matches",
    "score_match",
    "to_game_match",
]
