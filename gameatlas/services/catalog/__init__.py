"""
Catalog helpers shared by the repositories and services.
"""

from .mapper import (
    decode_string_list,
    document_to_game,
    encode_string_list,
    game_content,
    game_to_dict,
    game_to_document,
)
from .pagination import normalize_page_params, paginate

__all__ = [
    "decode_string_list",
    "document_to_game",
    "encode_string_list",
    "game_content",
    "game_to_dict",
    "game_to_document",
    "normalize_page_params",
    "paginate",
]
