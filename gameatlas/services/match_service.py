from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from gameatlas.dtos.match_dtos import MatchWeights
from gameatlas.errors import GameNotFoundError
from gameatlas.repositories.game_repository import GameRepository
from gameatlas.repositories.match_repository import MatchRepository
from gameatlas.services.matching import game_match_to_dict, rank_matches, to_game_match

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATE_POOL_SIZE = 100


class MatchService:
    def __init__(
        self,
        game_repository: GameRepository,
        match_repository: MatchRepository,
        default_weights: Optional[MatchWeights] = None,
        candidate_pool_size: int = DEFAULT_CANDIDATE_POOL_SIZE,
    ) -> None:
        self.game_repository = game_repository
        self.match_repository = match_repository
        self.default_weights = default_weights or MatchWeights()
        self.candidate_pool_size = candidate_pool_size

    def find_matches(
        self,
        game_id: str,
        weights: Optional[MatchWeights] = None,
        candidate_pool_size: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Rank the catalog against one game and persist the result as its current matches.
        """
        source = self.game_repository.get_by_game_id(game_id)
        if source is None:
            raise GameNotFoundError(game_id)

        weights = weights or self.default_weights
        pool_size = candidate_pool_size or self.candidate_pool_size
        candidates = self.game_repository.list_candidates(exclude_game_id=game_id, limit=pool_size)
        logger.debug("Scoring %d candidates against '%s'", len(candidates), source.title)

        ranked_results = rank_matches(source, candidates, weights)
        matches = [to_game_match(game, score) for game, score in ranked_results]

        self.match_repository.replace_for_source(game_id, matches)
        logger.info("Found %d matching games for '%s'", len(matches), source.title)
        return [game_match_to_dict(match) for match in matches]

    def list_matches(self, game_id: str) -> List[Dict[str, Any]]:
        if self.game_repository.get_by_game_id(game_id) is None:
            raise GameNotFoundError(game_id)
        return self.match_repository.list_for_source(game_id)
