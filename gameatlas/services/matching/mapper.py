from __future__ import annotations

from typing import Any, Dict

from gameatlas.dtos.game_dtos import GameRecord
from gameatlas.dtos.match_dtos import GameMatch


def to_game_match(game: GameRecord, score: int) -> GameMatch:
    return GameMatch(
        id=game.id,
        title=game.title,
        score=score,
        genres=list(game.genres),
        platforms=list(game.platforms),
        tags=list(game.tags),
    )


def game_match_to_dict(match: GameMatch) -> Dict[str, Any]:
    """
    Map a ranked match to the public response representation.
    """
    return match.model_dump()
