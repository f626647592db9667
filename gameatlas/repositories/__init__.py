"""
Repository layer for the document stores (in-memory or ChromaDB).
"""

from .discovery_list_repository import DiscoveryListRepository
from .game_repository import GameRepository
from .match_repository import MatchRepository

__all__ = ["DiscoveryListRepository", "GameRepository", "MatchRepository"]
