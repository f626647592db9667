from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from gameatlas.dtos.discovery_dtos import (
    DiscoveryFilters,
    DiscoveryListDTO,
    UpdateDiscoveryListRequest,
)
from gameatlas.errors import DiscoveryListNotFoundError
from gameatlas.repositories.discovery_list_repository import DiscoveryListRepository
from gameatlas.repositories.game_repository import GameRepository
from gameatlas.services.catalog import game_to_dict, paginate
from gameatlas.services.discovery import apply_game_filters

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class DiscoveryService:
    def __init__(
        self,
        game_repository: GameRepository,
        list_repository: DiscoveryListRepository,
    ) -> None:
        self.game_repository = game_repository
        self.list_repository = list_repository

    def search(
        self,
        filters: Optional[DiscoveryFilters] = None,
        page: int = 1,
        per_page: int = 20,
    ) -> Dict[str, Any]:
        """
        Filter the whole catalog and return one page of the matching games.
        """
        games = apply_game_filters(self.game_repository.list_all(), filters)
        page_items, normalized_page, normalized_per_page = paginate(games, page, per_page)
        logger.debug("Discovery search matched %d games", len(games))
        return {
            "page": normalized_page,
            "per_page": normalized_per_page,
            "total": len(games),
            "games": [game_to_dict(game) for game in page_items],
        }

    def create_list(
        self,
        project_id: str,
        name: str,
        description: str = "",
        filters: Optional[DiscoveryFilters] = None,
    ) -> DiscoveryListDTO:
        now = _now()
        discovery_list = DiscoveryListDTO(
            id=uuid.uuid4().hex,
            project_id=project_id,
            name=name,
            description=description or "",
            filters=filters or DiscoveryFilters(),
            is_public=False,
            created_at=now,
            updated_at=now,
        )
        self.list_repository.save(discovery_list)
        logger.info("Created discovery list '%s' for project '%s'", name, project_id)
        return discovery_list

    def get_list(self, list_id: str) -> DiscoveryListDTO:
        discovery_list = self.list_repository.get(list_id)
        if discovery_list is None:
            raise DiscoveryListNotFoundError(list_id)
        return discovery_list

    def list_for_project(self, project_id: str) -> List[DiscoveryListDTO]:
        return self.list_repository.list_for_project(project_id)

    def update_list(self, list_id: str, updates: UpdateDiscoveryListRequest) -> DiscoveryListDTO:
        current = self.get_list(list_id)
        changes: Dict[str, Any] = {}
        if updates.name is not None:
            changes["name"] = updates.name
        if updates.description is not None:
            changes["description"] = updates.description
        if updates.filters is not None:
            changes["filters"] = updates.filters
        if updates.is_public is not None:
            changes["is_public"] = updates.is_public

        # never earlier than the stored timestamp
        changes["updated_at"] = max(_now(), current.updated_at)
        updated = current.model_copy(update=changes)
        self.list_repository.save(updated)
        logger.info("Updated discovery list '%s'", list_id)
        return updated

    def delete_list(self, list_id: str) -> None:
        if not self.list_repository.delete(list_id):
            raise DiscoveryListNotFoundError(list_id)
        logger.info("Deleted discovery list '%s'", list_id)

    def run_list(self, list_id: str, page: int = 1, per_page: int = 20) -> Dict[str, Any]:
        """
        Apply a saved list's filters to the current catalog.
        """
        discovery_list = self.get_list(list_id)
        result = self.search(discovery_list.filters, page, per_page)
        result["list"] = discovery_list.model_dump(mode="json")
        return result
