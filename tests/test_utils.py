import json

import pytest
from haystack.document_stores.in_memory import InMemoryDocumentStore

from gameatlas.errors import CatalogError
from gameatlas.services.catalog import document_to_game, game_content, game_to_document
from gameatlas.utils.document_store_setup import get_document_store
from gameatlas.utils.prepare_haystack_docs import load_seed_games, prepare_haystack_documents
from tests import make_game


def test_memory_backend_creates_independent_stores():
    first = get_document_store("games", backend="memory")
    second = get_document_store("games", backend="MEMORY")

    assert isinstance(first, InMemoryDocumentStore)
    assert first is not second


def test_unknown_backend_is_rejected():
    with pytest.raises(CatalogError, match="Unknown document store backend"):
        get_document_store("games", backend="mongo")


def test_game_document_mapping():
    game = make_game("hades", ["Roguelike"], ["Steam"], ["Mythology"], price=24.99, description="Escape the underworld.")

    doc = game_to_document(game)

    assert doc.id == "hades"
    assert json.loads(doc.meta["genres"]) == ["Roguelike"]
    assert "developer" not in doc.meta
    assert doc.content == "Title: Hades. Genres: Roguelike. Platforms: Steam. Tags: Mythology. Escape the underworld."
    assert document_to_game(doc).model_dump() == game.model_dump()


def test_game_content_with_title_only():
    assert game_content(make_game("solo", title="Solo")) == "Title: Solo."


def test_prepare_haystack_documents_keeps_order():
    docs = prepare_haystack_documents([make_game("a"), make_game("b")])

    assert [doc.id for doc in docs] == ["a", "b"]


def test_bundled_seed_file_is_valid(request):
    seed_path = request.config.rootpath / "data" / "seed_games.json"

    games = load_seed_games(seed_path)

    assert len(games) == 8
    assert len({game.id for game in games}) == 8


def test_seed_file_must_hold_a_list(tmp_path):
    seed_file = tmp_path / "games.json"
    seed_file.write_text('"nope"')

    with pytest.raises(CatalogError, match="must contain a list"):
        load_seed_games(seed_file)


def _scalar_meta_only(meta):
    return {key: value for key, value in meta.items() if isinstance(value, (str, int, float, bool))}


def test_game_metadata_holds_only_scalar_values():
    game = make_game("hades", ["Roguelike", "Action"], ["Steam", "PC"], ["Mythology"], price=24.99, release_date="2020-09-17")

    doc = game_to_document(game)

    assert _scalar_meta_only(doc.meta) == doc.meta
    doc.meta = _scalar_meta_only(doc.meta)
    restored = document_to_game(doc)
    assert (restored.genres, restored.platforms, restored.tags) == (["Roguelike", "Action"], ["Steam", "PC"], ["Mythology"])


def test_game_survives_chroma_metadata_filtering():
    chroma = pytest.importorskip("haystack_integrations.document_stores.chroma")
    game = make_game("a", ["RPG"], ["PC"], ["Pixel"])

    doc = game_to_document(game)
    doc.meta = chroma.ChromaDocumentStore._filter_metadata(doc.meta)

    assert document_to_game(doc).model_dump() == game.model_dump()


def test_document_with_plain_list_metadata_still_decodes():
    doc = game_to_document(make_game("legacy"))
    doc.meta.update(genres=["RPG"], platforms=None)

    restored = document_to_game(doc)

    assert (restored.genres, restored.platforms, restored.tags) == (["RPG"], [], [])
