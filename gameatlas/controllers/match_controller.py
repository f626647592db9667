import logging

from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from gameatlas.controllers.services import match_service
from gameatlas.dtos.match_dtos import MatchRequest
from gameatlas.errors import GameNotFoundError

logger = logging.getLogger(__name__)

match_bp = Blueprint('matches', __name__)

@match_bp.route('/<game_id>', methods=['POST'])
def find_matches_route(game_id):
    """
    Find the catalog games most similar to a game
    ---
    tags:
      - Matches
    description: >
      Scores every candidate by shared genres (x3), tags (x2) and platforms (x1),
      drops candidates at or below min_score and returns the top_n best.
      Any field in the body overrides the configured default.
    parameters:
      - in: path
        name: game_id
        type: string
        required: true
      - in: body
        name: body
        required: false
        schema:
          $ref: '#/definitions/MatchRequest'
    responses:
      200:
        description: The ranked matches.
        schema:
          type: object
          properties:
            game_id:
              type: string
            matches:
              type: array
              items:
                $ref: '#/definitions/GameMatch'
      400:
        description: Invalid request data.
      404:
        description: Game not found.
    """
    try:
        service = match_service()
        req_data = MatchRequest.model_validate_json(request.data or b"{}")
        matches = service.find_matches(
            game_id,
            weights=req_data.apply_to(service.default_weights),
            candidate_pool_size=req_data.candidate_pool_size,
        )
        return jsonify({"game_id": game_id, "matches": matches})
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False)}), 400
    except GameNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except Exception as e:
        logger.exception("Match engine failed for game '%s'", game_id)
        return jsonify({"error": str(e)}), 500

@match_bp.route('/<game_id>', methods=['GET'])
def list_matches_route(game_id):
    """
    Get the stored matches of a game
    ---
    tags:
      - Matches
    parameters:
      - in: path
        name: game_id
        type: string
        required: true
    responses:
      200:
        description: The matches saved by the last run, best first.
      404:
        description: Game not found.
    """
    try:
        return jsonify({"game_id": game_id, "matches": match_service().list_matches(game_id)})
    except GameNotFoundError as e:
        return jsonify({"error": str(e)}), 404
