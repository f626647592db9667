from haystack.document_stores.errors import DocumentStoreError


class GameAtlasError(Exception):
    """Parent class for all GameAtlas exceptions."""

    pass


class CatalogError(GameAtlasError, DocumentStoreError):
    """Raised when the game catalog or one of its stores cannot be used."""

    pass


class ConfigurationError(GameAtlasError, ValueError):
    """Raised when an application setting holds an unusable value."""

    pass


class GameNotFoundError(GameAtlasError, LookupError):
    """Raised when a game id is not present in the catalog."""

    def __init__(self, game_id: str) -> None:
        super().__init__(f"Game '{game_id}' not found")
        self.game_id = game_id


class DiscoveryListNotFoundError(GameAtlasError, LookupError):
    """Raised when a discovery list id is unknown."""

    def __init__(self, list_id: str) -> None:
        super().__init__(f"Discovery list '{list_id}' not found")
        self.list_id = list_id
