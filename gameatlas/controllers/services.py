from flask import current_app

from gameatlas.services.catalog_service import CatalogService
from gameatlas.services.discovery_service import DiscoveryService
from gameatlas.services.match_service import MatchService


def _registry() -> dict:
    return current_app.extensions["gameatlas"]


def catalog_service() -> CatalogService:
    return _registry()["catalog"]


def match_service() -> MatchService:
    return _registry()["matches"]


def discovery_service() -> DiscoveryService:
    return _registry()["discovery"]
