import logging

from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from gameatlas.controllers.services import catalog_service
from gameatlas.dtos.game_dtos import ImportGamesRequest
from gameatlas.errors import CatalogError, GameNotFoundError
from gameatlas.services.catalog import game_to_dict

logger = logging.getLogger(__name__)

catalog_bp = Blueprint('catalog', __name__)

@catalog_bp.route('/health', methods=['GET'])
def health_check():
    """
    Health Check
    ---
    tags:
      - Health
    responses:
      200:
        description: Service is healthy
        schema:
          type: object
          properties:
            status:
              type: string
              example: ok
            games:
              type: integer
              example: 42
    """
    return jsonify({"status": "ok", "games": catalog_service().count()})

@catalog_bp.route('/games', methods=['GET'])
def list_games_route():
    """
    List catalog games with pagination
    ---
    tags:
      - Games
    parameters:
      - in: query
        name: page
        type: integer
        default: 1
      - in: query
        name: per_page
        type: integer
        default: 20
    responses:
      200:
        description: A paginated list of games.
        schema:
          type: object
          properties:
            page:
              type: integer
            per_page:
              type: integer
            total:
              type: integer
            games:
              type: array
              items:
                $ref: '#/definitions/GameRecord'
    """
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 20, type=int)
    return jsonify(catalog_service().list_games(page, per_page))

@catalog_bp.route('/games', methods=['POST'])
def import_games_route():
    """
    Import (or overwrite) games in the catalog
    ---
    tags:
      - Games
    parameters:
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/ImportGamesRequest'
    responses:
      201:
        description: Number of games written.
      400:
        description: Invalid request data.
    """
    try:
        req_data = ImportGamesRequest.model_validate_json(request.data or b"{}")
        imported = catalog_service().import_games(req_data.games)
        return jsonify({"imported": imported}), 201
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False)}), 400
    except CatalogError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Failed to import games")
        return jsonify({"error": str(e)}), 500

@catalog_bp.route('/games/<game_id>', methods=['GET'])
def get_game_route(game_id):
    """
    Get a specific game by its catalog id
    ---
    tags:
      - Games
    parameters:
      - in: path
        name: game_id
        type: string
        required: true
    responses:
      200:
        description: The game.
        schema:
          $ref: '#/definitions/GameRecord'
      404:
        description: Game not found.
    """
    try:
        return jsonify(game_to_dict(catalog_service().get_game(game_id)))
    except GameNotFoundError as e:
        return jsonify({"error": str(e)}), 404

@catalog_bp.route('/games/<game_id>', methods=['DELETE'])
def delete_game_route(game_id):
    """
    Remove a game from the catalog
    ---
    tags:
      - Games
    parameters:
      - in: path
        name: game_id
        type: string
        required: true
    responses:
      204:
        description: Deleted.
      404:
        description: Game not found.
    """
    try:
        catalog_service().delete_game(game_id)
        return "", 204
    except GameNotFoundError as e:
        return jsonify({"error": str(e)}), 404
