import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from haystack import Document
from pydantic import ValidationError
from tqdm import tqdm

from gameatlas.dtos.game_dtos import GameRecord
from gameatlas.errors import CatalogError
from gameatlas.services.catalog.mapper import game_to_document

logger = logging.getLogger(__name__)


def prepare_game_records(games_data: Iterable[Union[dict, GameRecord]]) -> List[GameRecord]:
    """
    Validate raw game dictionaries (e.g. rows exported from the games table).

    Args:
        games_data: dictionaries with at least `id` and `title` (GameRecord
            instances are accepted as-is).

    Returns:
        The validated records, in input order.

    Raises:
        CatalogError: if any entry is not a valid game; the message names its position.
    """
    records: List[GameRecord] = []
    for position, raw_game in enumerate(games_data):
        try:
            records.append(GameRecord.model_validate(raw_game))
        except ValidationError as e:
            raise CatalogError(f"Invalid game at position {position}: {e}") from e
    return records


def prepare_haystack_documents(games: List[GameRecord], show_progress: bool = False) -> List[Document]:
    """
    Convert catalog games into haystack Documents ready to be written to a store.
    """
    haystack_docs: List[Document] = []
    for game in tqdm(games, desc="Converting games to documents", disable=not show_progress):
        haystack_docs.append(game_to_document(game))

    logger.debug("Prepared %d haystack documents", len(haystack_docs))
    return haystack_docs


def load_seed_games(path: Union[str, Path]) -> List[GameRecord]:
    """
    Read a JSON array of games from disk.
    """
    seed_path = Path(path)
    try:
        with seed_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read seed games from '{seed_path}': {e}") from e

    if isinstance(payload, dict):
        payload = payload.get("games", [])
    if not isinstance(payload, list):
        raise CatalogError(f"Seed file '{seed_path}' must contain a list of games")

    logger.info("Loaded %d seed games from '%s'", len(payload), seed_path)
    return prepare_game_records(payload)
