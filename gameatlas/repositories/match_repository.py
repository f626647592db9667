from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from haystack import Document
from haystack.document_stores.types import DocumentStore, DuplicatePolicy

from gameatlas.dtos.match_dtos import GameMatch
from gameatlas.services.catalog.mapper import decode_string_list, encode_string_list


class MatchRepository:
    """
    Stores the latest ranked matches of each source game.
    """

    def __init__(self, document_store: DocumentStore) -> None:
        self._document_store = document_store

    def _documents_where(self, field: str, game_id: str) -> List[Document]:
        filters = {"field": f"meta.{field}", "operator": "==", "value": game_id}
        return self._document_store.filter_documents(filters=filters)

    def _documents_for_source(self, source_game_id: str) -> List[Document]:
        return self._documents_where("source_game_id", source_game_id)

    def _delete(self, documents: List[Document]) -> int:
        document_ids = [doc.id for doc in documents]
        if document_ids:
            self._document_store.delete_documents(document_ids)
        return len(document_ids)

    def replace_for_source(self, source_game_id: str, matches: List[GameMatch]) -> None:
        self.delete_for_source(source_game_id)
        if not matches:
            return

        created_at = datetime.now(timezone.utc).isoformat()
        documents = [
            Document(
                id=f"{source_game_id}:{match.id}",
                content=match.title,
                meta={
                    "source_game_id": source_game_id,
                    "matched_game_id": match.id,
                    "title": match.title,
                    "score": match.score,
                    "rank": rank,
                    "genres": encode_string_list(match.genres),
                    "platforms": encode_string_list(match.platforms),
                    "tags": encode_string_list(match.tags),
                    "created_at": created_at,
                },
            )
            for rank, match in enumerate(matches, start=1)
        ]
        self._document_store.write_documents(documents, policy=DuplicatePolicy.OVERWRITE)

    def list_for_source(self, source_game_id: str) -> List[Dict[str, Any]]:
        records = [
            {
                "game_id": doc.meta.get("source_game_id"),
                "matched_game": {
                    "id": doc.meta.get("matched_game_id"),
                    "title": doc.meta.get("title"),
                    "genres": decode_string_list(doc.meta.get("genres")),
                    "platforms": decode_string_list(doc.meta.get("platforms")),
                    "tags": decode_string_list(doc.meta.get("tags")),
                },
                "score": doc.meta.get("score", 0),
                "rank": doc.meta.get("rank", 0),
                "created_at": doc.meta.get("created_at"),
            }
            for doc in self._documents_for_source(source_game_id)
        ]
        records.sort(key=lambda record: (-record["score"], record["rank"]))
        return records

    def delete_for_source(self, source_game_id: str) -> int:
        return self._delete(self._documents_for_source(source_game_id))

    def delete_for_game(self, game_id: str) -> int:
        """
        Remove every match record in which the game takes part, as source or as matched game.
        """
        documents = {doc.id: doc for doc in self._documents_where("source_game_id", game_id)}
        for doc in self._documents_where("matched_game_id", game_id):
            documents[doc.id] = doc
        return self._delete(list(documents.values()))
