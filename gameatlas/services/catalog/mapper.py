from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from haystack import Document

from gameatlas.dtos.game_dtos import GameRecord

_LIST_FIELDS = ("genres", "platforms", "tags")
_SCALAR_FIELDS = (
    "developer",
    "publisher",
    "description",
    "cover_url",
    "price",
    "rating_average",
    "review_count",
    "download_count",
    "revenue_estimate",
)


def encode_string_list(values: Iterable[str]) -> str:
    """
    Serialize a list of strings for metadata stores that only accept scalar values (Chroma).
    """
    return json.dumps(list(values))


def decode_string_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return list(json.loads(value))
    return list(value)


def game_content(game: GameRecord) -> str:
    """
    Build the searchable text stored as the document content.
    """
    content_parts = [f"Title: {game.title}."]
    if game.genres:
        content_parts.append(f"Genres: {', '.join(game.genres)}.")
    if game.platforms:
        content_parts.append(f"Platforms: {', '.join(game.platforms)}.")
    if game.tags:
        content_parts.append(f"Tags: {', '.join(game.tags)}.")
    if game.description:
        content_parts.append(game.description)
    return " ".join(content_parts)


def game_to_document(game: GameRecord) -> Document:
    meta: Dict[str, Any] = {"game_id": game.id, "title": game.title}
    for field in _LIST_FIELDS:
        meta[field] = encode_string_list(getattr(game, field))
    for field in _SCALAR_FIELDS:
        meta[field] = getattr(game, field)
    meta["release_date"] = game.release_date.isoformat() if game.release_date else None

    # Drop None values; some document stores reject them in metadata
    meta_cleaned = {key: value for key, value in meta.items() if value is not None}
    return Document(id=game.id, content=game_content(game), meta=meta_cleaned)


def document_to_game(doc: Document) -> GameRecord:
    meta = doc.meta or {}
    payload: Dict[str, Any] = {
        "id": meta.get("game_id", doc.id),
        "title": meta.get("title", ""),
        "release_date": meta.get("release_date"),
    }
    for field in _LIST_FIELDS:
        payload[field] = decode_string_list(meta.get(field))
    for field in _SCALAR_FIELDS:
        payload[field] = meta.get(field)
    return GameRecord.model_validate(payload)


def game_to_dict(game: GameRecord) -> Dict[str, Any]:
    """
    Map a catalog game to the public JSON representation.
    """
    return game.model_dump(mode="json")
