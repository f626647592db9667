import logging
import os

from haystack.document_stores.in_memory import InMemoryDocumentStore
from haystack.document_stores.types import DocumentStore

from gameatlas.errors import CatalogError

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("memory", "chroma")


def get_document_store(
    collection_name: str,
    backend: str = os.getenv("DOCUMENT_STORE_BACKEND", "memory"),
    persistence_directory: str = os.getenv("CHROMA_PERSISTENCE_DIR", "./data/chroma_db"),
) -> DocumentStore:
    """
    Create the document store backing one collection (games, matches, discovery lists).
    """
    backend = (backend or "memory").lower()
    if backend not in SUPPORTED_BACKENDS:
        raise CatalogError(
            f"Unknown document store backend '{backend}', expected one of {', '.join(SUPPORTED_BACKENDS)}"
        )

    if backend == "memory":
        logger.debug("Using in-memory document store for collection '%s'", collection_name)
        return InMemoryDocumentStore()

    from haystack_integrations.document_stores.chroma import ChromaDocumentStore

    logger.info(
        "Connecting to ChromaDB collection '%s' persisted in '%s'",
        collection_name,
        persistence_directory,
    )
    document_store = ChromaDocumentStore(
        collection_name=collection_name,
        persist_path=persistence_directory,
    )

    try:
        logger.info(
            "Connected to collection '%s'. Existing documents: %d",
            collection_name,
            document_store.count_documents(),
        )
    except Exception as e:
        raise CatalogError(f"Could not open Chroma collection '{collection_name}': {e}") from e

    return document_store
