from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from gameatlas.dtos.game_dtos import GameRecord
from gameatlas.dtos.match_dtos import MatchWeights

DEFAULT_WEIGHTS = MatchWeights()


def overlap(left: Iterable[str], right: Iterable[str]) -> int:
    """
    Count the values present in both collections, ignoring duplicates.
    """
    return len(set(left) & set(right))


def score_match(
    source: GameRecord,
    candidate: GameRecord,
    weights: Optional[MatchWeights] = None,
) -> int:
    """
    Weighted genre/tag/platform overlap between two games.
    """
    weights = weights or DEFAULT_WEIGHTS
    return (
        overlap(source.genres, candidate.genres) * weights.genre_weight
        + overlap(source.tags, candidate.tags) * weights.tag_weight
        + overlap(source.platforms, candidate.platforms) * weights.platform_weight
    )


def rank_matches(
    source: GameRecord,
    candidates: Iterable[GameRecord],
    weights: Optional[MatchWeights] = None,
) -> List[Tuple[GameRecord, int]]:
    """
    Score every candidate against `source`, drop those at or below the threshold
    and return the best `top_n`, highest score first.
    Equal scores keep their input order.
    """
    weights = weights or DEFAULT_WEIGHTS
    ranked_results: List[Tuple[GameRecord, int]] = []

    for candidate in candidates:
        score = score_match(source, candidate, weights)
        if score > weights.min_score:
            ranked_results.append((candidate, score))

    ranked_results.sort(key=lambda item: item[1], reverse=True)
    return ranked_results[: weights.top_n]
