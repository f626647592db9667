from datetime import datetime, timedelta, timezone

from haystack.document_stores.in_memory import InMemoryDocumentStore

from gameatlas.dtos.discovery_dtos import DiscoveryFilters, DiscoveryListDTO
from gameatlas.dtos.match_dtos import GameMatch
from gameatlas.repositories import MatchRepository
from tests import make_game


def test_upsert_and_get_round_trip(game_repository, sample_games):
    assert game_repository.upsert_games(sample_games) == len(sample_games)

    stored = game_repository.get_by_game_id("hollow-knight")

    assert stored.model_dump() == sample_games[0].model_dump()
    assert game_repository.count() == len(sample_games)


def test_upsert_overwrites_existing_game(game_repository, sample_games):
    game_repository.upsert_games(sample_games)
    game_repository.upsert_games([make_game("hollow-knight", ["Action"], title="Hollow Knight GOTY")])

    stored = game_repository.get_by_game_id("hollow-knight")

    assert stored.title == "Hollow Knight GOTY"
    assert stored.genres == ["Action"]
    assert stored.price is None
    assert game_repository.count() == len(sample_games)


def test_upsert_of_nothing_writes_nothing(game_repository):
    assert game_repository.upsert_games([]) == 0
    assert game_repository.count() == 0


def test_get_unknown_game_returns_none(game_repository):
    assert game_repository.get_by_game_id("missing") is None


def test_list_candidates_excludes_source_and_respects_limit(game_repository, sample_games):
    game_repository.upsert_games(sample_games)

    candidates = game_repository.list_candidates("dead-cells", limit=3)

    assert [game.id for game in candidates] == ["hollow-knight", "stardew-valley", "disco-elysium"]


def test_list_paginated(game_repository, sample_games):
    game_repository.upsert_games(sample_games)

    games, total, page, per_page = game_repository.list_paginated(page=2, per_page=2)

    assert [game.id for game in games] == ["stardew-valley", "disco-elysium"]
    assert (total, page, per_page) == (5, 2, 2)


def test_list_paginated_normalizes_bad_parameters(game_repository, sample_games):
    game_repository.upsert_games(sample_games)

    games, total, page, per_page = game_repository.list_paginated(page=0, per_page=-5)

    assert [game.id for game in games] == ["hollow-knight"]
    assert (total, page, per_page) == (5, 1, 1)


def test_delete_game(game_repository, sample_games):
    game_repository.upsert_games(sample_games)

    assert game_repository.delete_game("tetris-web") is True
    assert game_repository.delete_game("tetris-web") is False
    assert game_repository.get_by_game_id("tetris-web") is None


def _match(game_id, score):
    return GameMatch(id=game_id, title=game_id.title(), score=score, genres=["RPG"], platforms=[], tags=[])


def test_match_repository_replaces_previous_run(match_repository):
    match_repository.replace_for_source("source", [_match("a", 5), _match("b", 3)])
    match_repository.replace_for_source("source", [_match("c", 4)])
    match_repository.replace_for_source("other", [_match("a", 1)])

    records = match_repository.list_for_source("source")

    assert [(record["matched_game"]["id"], record["score"]) for record in records] == [("c", 4)]
    assert records[0]["game_id"] == "source"
    assert records[0]["matched_game"]["genres"] == ["RPG"]


def test_match_repository_orders_by_score_then_rank(match_repository):
    match_repository.replace_for_source("source", [_match("a", 5), _match("b", 5), _match("c", 7)])

    records = match_repository.list_for_source("source")

    assert [record["matched_game"]["id"] for record in records] == ["c", "a", "b"]


def test_match_repository_empty_run_clears_matches(match_repository):
    match_repository.replace_for_source("source", [_match("a", 5)])
    match_repository.replace_for_source("source", [])

    assert match_repository.list_for_source("source") == []


def test_match_records_keep_attribute_lists_as_scalar_metadata():
    store = InMemoryDocumentStore()
    repository = MatchRepository(store)
    match = GameMatch(id="a", title="A", score=6, genres=["RPG"], platforms=["PC", "Steam"], tags=["Pixel"])

    repository.replace_for_source("source", [match])

    [doc] = store.filter_documents()
    assert all(isinstance(value, (str, int, float, bool)) for value in doc.meta.values())
    matched = repository.list_for_source("source")[0]["matched_game"]
    assert (matched["genres"], matched["platforms"], matched["tags"]) == (["RPG"], ["PC", "Steam"], ["Pixel"])


def test_match_repository_delete_for_game_covers_both_sides(match_repository):
    match_repository.replace_for_source("source", [_match("gone", 5), _match("kept", 3)])
    match_repository.replace_for_source("gone", [_match("source", 5)])
    match_repository.replace_for_source("other", [_match("kept", 2)])

    assert match_repository.delete_for_game("gone") == 2

    assert [record["matched_game"]["id"] for record in match_repository.list_for_source("source")] == ["kept"]
    assert match_repository.list_for_source("gone") == []
    assert len(match_repository.list_for_source("other")) == 1


def _discovery_list(list_id, project_id, updated_at, filters=None):
    created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return DiscoveryListDTO(
        id=list_id,
        project_id=project_id,
        name=f"List {list_id}",
        filters=filters or DiscoveryFilters(),
        created_at=created_at,
        updated_at=updated_at,
    )


def test_discovery_list_round_trip(list_repository):
    saved = _discovery_list(
        "one",
        "project",
        datetime(2024, 2, 1, tzinfo=timezone.utc),
        DiscoveryFilters(platforms=["pc"], price_range=(0, 10)),
    )
    list_repository.save(saved)

    assert list_repository.get("one").model_dump() == saved.model_dump()
    assert list_repository.get("missing") is None


def test_discovery_lists_are_scoped_and_sorted_by_update_time(list_repository):
    base = datetime(2024, 2, 1, tzinfo=timezone.utc)
    list_repository.save(_discovery_list("old", "project", base))
    list_repository.save(_discovery_list("new", "project", base + timedelta(days=2)))
    list_repository.save(_discovery_list("mid", "project", base + timedelta(days=1)))
    list_repository.save(_discovery_list("foreign", "other", base + timedelta(days=5)))

    assert [item.id for item in list_repository.list_for_project("project")] == ["new", "mid", "old"]


def test_discovery_list_delete(list_repository):
    list_repository.save(_discovery_list("one", "project", datetime(2024, 2, 1, tzinfo=timezone.utc)))

    assert list_repository.delete("one") is True
    assert list_repository.delete("one") is False
    assert list_repository.list_for_project("project") == []
