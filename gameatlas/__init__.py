import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flasgger import Flasgger
from pydantic import ValidationError

from gameatlas.dtos.discovery_dtos import (
    CreateDiscoveryListRequest,
    DiscoveryFilters,
    DiscoveryListDTO,
    DiscoverySearchRequest,
    UpdateDiscoveryListRequest,
)
from gameatlas.dtos.game_dtos import GameRecord, ImportGamesRequest
from gameatlas.dtos.match_dtos import GameMatch, MatchRequest, MatchWeights
from gameatlas.errors import ConfigurationError
from gameatlas.repositories import DiscoveryListRepository, GameRepository, MatchRepository
from gameatlas.services.catalog_service import CatalogService
from gameatlas.services.discovery_service import DiscoveryService
from gameatlas.services.match_service import MatchService
from gameatlas.utils.document_store_setup import get_document_store

logger = logging.getLogger(__name__)

EXTENSION_KEY = "gameatlas"

_WEIGHT_SETTINGS = {
    "genre_weight": "MATCH_GENRE_WEIGHT",
    "tag_weight": "MATCH_TAG_WEIGHT",
    "platform_weight": "MATCH_PLATFORM_WEIGHT",
    "min_score": "MATCH_MIN_SCORE",
    "top_n": "MATCH_TOP_N",
}


def _configure_logging(level_name: str) -> None:
  logging.basicConfig(
      level=getattr(logging, level_name, logging.INFO),
      format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
  )


def _default_weights(config) -> MatchWeights:
  try:
    return MatchWeights(**{field: config[setting] for field, setting in _WEIGHT_SETTINGS.items()})
  except ValidationError as e:
    problems = "; ".join(
        f"{_WEIGHT_SETTINGS.get(str(error['loc'][0]), error['loc'][0])}: {error['msg']}"
        for error in e.errors(include_url=False)
    )
    raise ConfigurationError(f"Invalid match settings: {problems}") from e


def _build_services(config) -> dict:
  backend = config["DOCUMENT_STORE_BACKEND"]
  persistence_directory = config["CHROMA_PERSISTENCE_DIR"]
  prefix = config["CHROMA_COLLECTION_PREFIX"]

  def _store(suffix):
      return get_document_store(
          collection_name=f"{prefix}_{suffix}",
          backend=backend,
          persistence_directory=persistence_directory,
      )

  game_repository = GameRepository(_store("games"))
  match_repository = MatchRepository(_store("matches"))
  default_weights = _default_weights(config)
  if config["MATCH_CANDIDATE_POOL"] < 1:
    raise ConfigurationError("Invalid match settings: MATCH_CANDIDATE_POOL must be at least 1")

  return {
      "catalog": CatalogService(game_repository, match_repository),
      "matches": MatchService(
          game_repository,
          match_repository,
          default_weights=default_weights,
          candidate_pool_size=config["MATCH_CANDIDATE_POOL"],
      ),
      "discovery": DiscoveryService(game_repository, DiscoveryListRepository(_store("discovery_lists"))),
  }


def create_app(config_object="gameatlas.config.config.Config"):
  app = Flask(__name__)

  CORS(app)

  app.config.from_object(config_object)
  _configure_logging(app.config.get("LOG_LEVEL", "INFO"))

  # Generate OpenAPI schemas from Pydantic models with Swagger-friendly refs
  def _schema(model):
      return model.model_json_schema(ref_template="#/definitions/{model}")

  pydantic_schemas = {
      model.__name__: _schema(model)
      for model in (
          GameRecord,
          ImportGamesRequest,
          MatchWeights,
          MatchRequest,
          GameMatch,
          DiscoveryFilters,
          DiscoverySearchRequest,
          CreateDiscoveryListRequest,
          UpdateDiscoveryListRequest,
          DiscoveryListDTO,
      )
  }

  # Flasgger configuration
  swagger_template = {
      "swagger": "2.0",
      "info": {
          "title": "GameAtlas Match & Discovery API",
          "description": "API for finding similar games and running saved discovery searches.",
          "version": "1.0.0"
      },
      "basePath": "/api",
      "schemes": [
          "http"
      ],
      "definitions": pydantic_schemas
  }

  Flasgger(app, template=swagger_template)

  services = _build_services(app.config)
  app.extensions[EXTENSION_KEY] = services

  seed_path = app.config.get("SEED_GAMES_PATH")
  if seed_path:
      services["catalog"].import_seed_file(seed_path)

  @app.route('/')
  def index():
    return jsonify({"message": "Welcome to the GameAtlas API!"})

  from gameatlas.routes import api_bp as routes

  app.register_blueprint(routes, url_prefix='/api')

  logger.info("GameAtlas started with '%s' document store", app.config["DOCUMENT_STORE_BACKEND"])
  return app
