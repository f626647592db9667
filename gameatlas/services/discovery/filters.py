from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from gameatlas.dtos.discovery_dtos import DiscoveryFilters
from gameatlas.dtos.game_dtos import GameRecord

from .aliases import GENRE_ALIASES, PLATFORM_ALIASES, AliasTable, normalize_term, term_matches

# (filter field, game accessor, alias table)
_TERM_DIMENSIONS: Tuple[Tuple[str, Callable[[GameRecord], List[str]], Optional[AliasTable]], ...] = (
    ("platforms", lambda game: game.platforms, PLATFORM_ALIASES),
    ("genres", lambda game: game.genres, GENRE_ALIASES),
    ("tags", lambda game: game.tags, None),
    ("developers", lambda game: [game.developer] if game.developer else [], None),
    ("publishers", lambda game: [game.publisher] if game.publisher else [], None),
)

_RANGE_DIMENSIONS: Tuple[Tuple[str, Callable[[GameRecord], Optional[float]]], ...] = (
    ("price_range", lambda game: game.price),
    ("rating_range", lambda game: game.rating_average),
    ("release_year_range", lambda game: game.release_year),
    ("download_range", lambda game: game.download_count),
    ("revenue_range", lambda game: game.revenue_estimate),
)


def _active_terms(terms: Optional[Sequence[str]]) -> List[str]:
    return [term for term in (terms or ()) if normalize_term(term)]


def _in_range(value: Optional[float], bounds: Optional[Tuple[float, float]]) -> bool:
    if bounds is None or value is None:
        return True
    low, high = bounds
    return low <= value <= high


def game_matches_filters(
    game: GameRecord,
    filters: DiscoveryFilters,
    platform_aliases: Optional[AliasTable] = None,
    genre_aliases: Optional[AliasTable] = None,
) -> bool:
    """
    True when `game` satisfies every criterion present in `filters`.

    List criteria pass when any filter term matches any of the game's values;
    range criteria are inclusive and pass when the game has no value for them.
    """
    alias_overrides = {"platforms": platform_aliases, "genres": genre_aliases}

    for field, accessor, default_aliases in _TERM_DIMENSIONS:
        terms = _active_terms(getattr(filters, field))
        if not terms:
            continue
        aliases = alias_overrides.get(field)
        if aliases is None:
            aliases = default_aliases
        values = accessor(game)
        if not any(term_matches(term, values, aliases) for term in terms):
            return False

    for field, accessor in _RANGE_DIMENSIONS:
        if not _in_range(accessor(game), getattr(filters, field)):
            return False

    return True


def apply_game_filters(
    games: Iterable[GameRecord],
    filters: Optional[DiscoveryFilters],
    platform_aliases: Optional[AliasTable] = None,
    genre_aliases: Optional[AliasTable] = None,
) -> List[GameRecord]:
    """
    Return the games matching `filters`, in their original order.
    """
    if filters is None:
        return list(games)
    return [
        game
        for game in games
        if game_matches_filters(game, filters, platform_aliases, genre_aliases)
    ]
