"""
Discovery search: fuzzy, synonym-aware filtering of catalog games.
"""

from .aliases import GENRE_ALIASES, PLATFORM_ALIASES, expand_term, fuzzy_contains, term_matches
from .filters import apply_game_filters, game_matches_filters

__all__ = [
    "GENRE_ALIASES",
    "PLATFORM_ALIASES",
    "apply_game_filters",
    "expand_term",
    "fuzzy_contains",
    "game_matches_filters",
    "term_matches",
]
