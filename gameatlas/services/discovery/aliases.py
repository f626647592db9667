"""
Synonym tables used by discovery search.

Keys are canonical filter terms (lower case); values are related terms a game
may be labelled with instead. Expansion only goes from the key to its aliases:
filtering on "pc" finds Steam games, filtering on "steam" does not find every PC game.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence

AliasTable = Mapping[str, Sequence[str]]

PLATFORM_ALIASES: AliasTable = {
    "pc": ["steam", "windows", "epic games", "gog", "itch.io"],
    "mobile": ["ios", "android", "iphone", "ipad"],
    "console": ["xbox", "playstation", "switch", "nintendo"],
    "playstation": ["ps4", "ps5", "psn", "ps vita"],
    "nintendo": ["switch", "3ds", "wii"],
    "mac": ["macos", "os x"],
    "web": ["browser", "html5", "webgl"],
    "vr": ["virtual reality", "oculus", "quest", "vive"],
}

GENRE_ALIASES: AliasTable = {
    "rpg": ["role-playing", "role playing"],
    "fps": ["first-person shooter", "first person shooter"],
    "shooter": ["fps", "shoot 'em up", "shmup"],
    "strategy": ["rts", "tbs", "4x", "tactics"],
    "simulation": ["simulator"],
    "roguelike": ["roguelite", "rogue-like", "rogue-lite"],
    "action": ["hack and slash", "beat 'em up"],
    "adventure": ["point-and-click", "point & click", "visual novel"],
    "mmo": ["massively multiplayer"],
    "moba": ["multiplayer online battle arena"],
    "casual": ["idle", "clicker"],
}


def normalize_term(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def expand_term(term: str, aliases: Optional[AliasTable] = None) -> List[str]:
    """
    Return the normalized term followed by its aliases (if any).
    """
    normalized = normalize_term(term)
    if not normalized:
        return []
    expanded = [normalized]
    if aliases:
        expanded.extend(normalize_term(alias) for alias in aliases.get(normalized, ()))
    return [value for value in expanded if value]


def fuzzy_contains(left: str, right: str) -> bool:
    """
    True when either (normalized, non-blank) string contains the other.
    """
    left, right = normalize_term(left), normalize_term(right)
    if not left or not right:
        return False
    return left in right or right in left


def term_matches(term: str, values: Iterable[str], aliases: Optional[AliasTable] = None) -> bool:
    """
    True when `term`, or any of its aliases, fuzzily matches one of `values`.
    """
    expanded = expand_term(term, aliases)
    if not expanded:
        return False
    values = [value for value in values if normalize_term(value)]
    return any(fuzzy_contains(candidate, value) for candidate in expanded for value in values)
