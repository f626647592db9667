"""
Pytest configuration and fixtures.

Every app built here uses in-memory document stores, so tests never touch disk.
"""

import pytest
from haystack.document_stores.in_memory import InMemoryDocumentStore

from gameatlas import EXTENSION_KEY, create_app
from gameatlas.repositories import DiscoveryListRepository, GameRepository, MatchRepository
from tests import InMemoryConfig, make_game


@pytest.fixture
def app():
    return create_app(InMemoryConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return app.extensions[EXTENSION_KEY]


@pytest.fixture
def game_repository():
    return GameRepository(InMemoryDocumentStore())


@pytest.fixture
def match_repository():
    return MatchRepository(InMemoryDocumentStore())


@pytest.fixture
def list_repository():
    return DiscoveryListRepository(InMemoryDocumentStore())


@pytest.fixture
def sample_games():
    return [
        make_game("hollow-knight", ["Metroidvania", "Action"], ["Steam", "Nintendo Switch"], ["Souls-like", "Difficult"],
                  price=14.99, rating_average=4.8, release_date="2017-02-24", developer="Team Cherry"),
        make_game("dead-cells", ["Roguelite", "Metroidvania", "Action"], ["Steam", "iOS", "Android"], ["Souls-like", "Pixel Graphics"],
                  price=24.99, rating_average=4.7, release_date="2018-08-07", developer="Motion Twin"),
        make_game("stardew-valley", ["Simulation", "Role-Playing"], ["Windows", "Nintendo Switch"], ["Farming", "Cozy"],
                  price=14.99, rating_average=4.9, release_date="2016-02-26"),
        make_game("disco-elysium", ["RPG", "Adventure"], ["PlayStation 5", "Xbox Series X"], ["Story Rich", "Detective"],
                  price=39.99, release_date="2019-10-15", developer="ZA/UM"),
        make_game("tetris-web", ["Puzzle"], ["Browser"], ["Classic"]),
    ]
