from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from haystack.document_stores.types import DocumentStore, DuplicatePolicy

from gameatlas.dtos.game_dtos import GameRecord
from gameatlas.services.catalog.mapper import document_to_game
from gameatlas.services.catalog.pagination import paginate
from gameatlas.utils.prepare_haystack_docs import prepare_haystack_documents

logger = logging.getLogger(__name__)

BULK_PROGRESS_THRESHOLD = 500


class GameRepository:
    """
    Data access layer around the games document store.
    Encapsulates filtering, pagination and indexing concerns.
    """

    def __init__(self, document_store: DocumentStore) -> None:
        self._document_store = document_store

    def upsert_games(self, games: List[GameRecord]) -> int:
        """
        Write the games, replacing any stored game with the same id.
        """
        if not games:
            return 0

        documents = prepare_haystack_documents(games, show_progress=len(games) >= BULK_PROGRESS_THRESHOLD)
        written = self._document_store.write_documents(documents, policy=DuplicatePolicy.OVERWRITE)
        logger.debug("Wrote %s game documents", written)
        return len(documents)

    def get_by_game_id(self, game_id: str) -> Optional[GameRecord]:
        filters = {"field": "meta.game_id", "operator": "==", "value": game_id}
        documents = self._document_store.filter_documents(filters=filters)
        if documents:
            return document_to_game(documents[0])
        return None

    def list_all(self) -> List[GameRecord]:
        return [document_to_game(doc) for doc in self._document_store.filter_documents()]

    def list_candidates(self, exclude_game_id: str, limit: int = 100) -> List[GameRecord]:
        """
        Every game except `exclude_game_id`, in store order, capped at `limit`.
        """
        filters = {"field": "meta.game_id", "operator": "!=", "value": exclude_game_id}
        documents = self._document_store.filter_documents(filters=filters)
        return [document_to_game(doc) for doc in documents[: max(limit, 0)]]

    def list_paginated(self, page: int, per_page: int) -> Tuple[List[GameRecord], int, int, int]:
        games = self.list_all()
        page_items, page, per_page = paginate(games, page, per_page)
        return page_items, len(games), page, per_page

    def delete_game(self, game_id: str) -> bool:
        if self.get_by_game_id(game_id) is None:
            return False
        self._document_store.delete_documents([game_id])
        return True

    def count(self) -> int:
        return self._document_store.count_documents()
