from __future__ import annotations

from typing import List, Optional

from haystack import Document
from haystack.document_stores.types import DocumentStore, DuplicatePolicy

from gameatlas.dtos.discovery_dtos import DiscoveryFilters, DiscoveryListDTO


def _list_to_document(discovery_list: DiscoveryListDTO) -> Document:
    # Filters are serialized so that flat-metadata stores (Chroma) can hold them
    return Document(
        id=discovery_list.id,
        content=f"{discovery_list.name}. {discovery_list.description}".strip(),
        meta={
            "list_id": discovery_list.id,
            "project_id": discovery_list.project_id,
            "name": discovery_list.name,
            "description": discovery_list.description,
            "filters": discovery_list.filters.model_dump_json(exclude_none=True),
            "is_public": discovery_list.is_public,
            "created_at": discovery_list.created_at.isoformat(),
            "updated_at": discovery_list.updated_at.isoformat(),
        },
    )


def _document_to_list(doc: Document) -> DiscoveryListDTO:
    meta = doc.meta or {}
    return DiscoveryListDTO(
        id=meta.get("list_id", doc.id),
        project_id=meta["project_id"],
        name=meta["name"],
        description=meta.get("description", ""),
        filters=DiscoveryFilters.model_validate_json(meta.get("filters") or "{}"),
        is_public=bool(meta.get("is_public", False)),
        created_at=meta["created_at"],
        updated_at=meta["updated_at"],
    )


class DiscoveryListRepository:
    """
    Persistence for saved discovery lists.
    """

    def __init__(self, document_store: DocumentStore) -> None:
        self._document_store = document_store

    def save(self, discovery_list: DiscoveryListDTO) -> DiscoveryListDTO:
        self._document_store.write_documents(
            [_list_to_document(discovery_list)], policy=DuplicatePolicy.OVERWRITE
        )
        return discovery_list

    def get(self, list_id: str) -> Optional[DiscoveryListDTO]:
        filters = {"field": "meta.list_id", "operator": "==", "value": list_id}
        documents = self._document_store.filter_documents(filters=filters)
        if documents:
            return _document_to_list(documents[0])
        return None

    def list_for_project(self, project_id: str) -> List[DiscoveryListDTO]:
        """
        All lists of a project, most recently updated first.
        """
        filters = {"field": "meta.project_id", "operator": "==", "value": project_id}
        lists = [_document_to_list(doc) for doc in self._document_store.filter_documents(filters=filters)]
        lists.sort(key=lambda item: item.updated_at, reverse=True)
        return lists

    def delete(self, list_id: str) -> bool:
        if self.get(list_id) is None:
            return False
        self._document_store.delete_documents([list_id])
        return True
