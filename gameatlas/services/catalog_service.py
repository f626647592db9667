from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from gameatlas.dtos.game_dtos import GameRecord
from gameatlas.errors import GameNotFoundError
from gameatlas.repositories.game_repository import GameRepository
from gameatlas.repositories.match_repository import MatchRepository
from gameatlas.services.catalog import game_to_dict
from gameatlas.utils.prepare_haystack_docs import load_seed_games, prepare_game_records

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, repository: GameRepository, match_repository: Optional[MatchRepository] = None) -> None:
        self.repository = repository
        self.match_repository = match_repository

    def import_games(self, games: Iterable[Union[GameRecord, dict]]) -> int:
        """Validate and upsert games; returns how many were written."""
        records = prepare_game_records(games)
        written = self.repository.upsert_games(records)
        logger.info("Imported %d games into the catalog", written)
        return written

    def import_seed_file(self, path: Union[str, Path]) -> int:
        return self.import_games(load_seed_games(path))

    def get_game(self, game_id: str) -> GameRecord:
        game = self.repository.get_by_game_id(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    def all_games(self) -> List[GameRecord]:
        return self.repository.list_all()

    def list_games(self, page: int = 1, per_page: int = 20) -> Dict[str, Any]:
        games, total, normalized_page, normalized_per_page = self.repository.list_paginated(page, per_page)
        return {
            "page": normalized_page,
            "per_page": normalized_per_page,
            "total": total,
            "games": [game_to_dict(game) for game in games],
        }

    def delete_game(self, game_id: str) -> None:
        if not self.repository.delete_game(game_id):
            raise GameNotFoundError(game_id)
        if self.match_repository is not None:
            removed = self.match_repository.delete_for_game(game_id)
            logger.debug("Removed %d match records of game '%s'", removed, game_id)
        logger.info("Deleted game '%s' from the catalog", game_id)

    def count(self) -> int:
        return self.repository.count()
