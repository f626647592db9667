from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def normalize_page_params(page: int, per_page: int) -> Tuple[int, int]:
    """
    Ensure pagination parameters are within sensible bounds.
    """
    normalized_page = max(page, 1)
    normalized_per_page = max(per_page, 1)
    return normalized_page, normalized_per_page


def paginate(items: Sequence[T], page: int, per_page: int) -> Tuple[List[T], int, int]:
    """
    Slice an in-memory sequence; returns the page items and the normalized parameters.
    """
    page, per_page = normalize_page_params(page, per_page)
    offset = (page - 1) * per_page
    return list(items[offset : offset + per_page]), page, per_page
