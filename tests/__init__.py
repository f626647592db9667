"""
Shared test utilities.
"""

from gameatlas.config.config import Config
from gameatlas.dtos.game_dtos import GameRecord


class InMemoryConfig(Config):
    TESTING = True
    DOCUMENT_STORE_BACKEND = "memory"
    SEED_GAMES_PATH = None
    LOG_LEVEL = "WARNING"
    MATCH_GENRE_WEIGHT = 3
    MATCH_TAG_WEIGHT = 2
    MATCH_PLATFORM_WEIGHT = 1
    MATCH_MIN_SCORE = 0
    MATCH_TOP_N = 10
    MATCH_CANDIDATE_POOL = 100


def make_game(game_id, genres=(), platforms=(), tags=(), **extra):
    return GameRecord(
        id=game_id,
        title=extra.pop("title", game_id.replace("-", " ").title()),
        genres=list(genres),
        platforms=list(platforms),
        tags=list(tags),
        **extra,
    )
