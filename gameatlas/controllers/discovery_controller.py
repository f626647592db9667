import logging

from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from gameatlas.controllers.services import discovery_service
from gameatlas.dtos.discovery_dtos import (
    CreateDiscoveryListRequest,
    DiscoverySearchRequest,
    UpdateDiscoveryListRequest,
)
from gameatlas.errors import DiscoveryListNotFoundError

logger = logging.getLogger(__name__)

discovery_bp = Blueprint('discovery', __name__)


def _validation_error(e: ValidationError):
    return jsonify({"error": e.errors(include_url=False, include_context=False)}), 400


@discovery_bp.route('/discovery/search', methods=['POST'])
def search_route():
    """
    Filter the catalog
    ---
    tags:
      - Discovery
    description: >
      Platforms and genres match by case-insensitive substring in either direction,
      widened by synonyms ("pc" also finds Steam games). Ranges are inclusive and
      games without a value for a range are kept.
    parameters:
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/DiscoverySearchRequest'
        examples:
          default:
            value:
              filters:
                platforms: ["pc"]
                genres: ["rpg"]
                price_range: [0, 20]
              page: 1
              per_page: 20
    responses:
      200:
        description: One page of matching games.
      400:
        description: Invalid request data.
    """
    try:
        req_data = DiscoverySearchRequest.model_validate_json(request.data or b"{}")
        return jsonify(discovery_service().search(req_data.filters, req_data.page, req_data.per_page))
    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        logger.exception("Discovery search failed")
        return jsonify({"error": str(e)}), 500

@discovery_bp.route('/projects/<project_id>/discovery-lists', methods=['GET'])
def list_discovery_lists_route(project_id):
    """
    List the saved discovery lists of a project
    ---
    tags:
      - Discovery Lists
    parameters:
      - in: path
        name: project_id
        type: string
        required: true
    responses:
      200:
        description: Lists, most recently updated first.
        schema:
          type: object
          properties:
            lists:
              type: array
              items:
                $ref: '#/definitions/DiscoveryListDTO'
    """
    lists = discovery_service().list_for_project(project_id)
    return jsonify({"lists": [item.model_dump(mode="json") for item in lists]})

@discovery_bp.route('/projects/<project_id>/discovery-lists', methods=['POST'])
def create_discovery_list_route(project_id):
    """
    Save a discovery list
    ---
    tags:
      - Discovery Lists
    parameters:
      - in: path
        name: project_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/CreateDiscoveryListRequest'
    responses:
      201:
        description: The created list.
        schema:
          $ref: '#/definitions/DiscoveryListDTO'
      400:
        description: Invalid request data.
    """
    try:
        req_data = CreateDiscoveryListRequest.model_validate_json(request.data or b"{}")
        created = discovery_service().create_list(
            project_id=project_id,
            name=req_data.name,
            description=req_data.description,
            filters=req_data.filters,
        )
        return jsonify(created.model_dump(mode="json")), 201
    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        logger.exception("Failed to create discovery list for project '%s'", project_id)
        return jsonify({"error": str(e)}), 500

@discovery_bp.route('/discovery-lists/<list_id>', methods=['GET'])
def get_discovery_list_route(list_id):
    """
    Get a discovery list
    ---
    tags:
      - Discovery Lists
    parameters:
      - in: path
        name: list_id
        type: string
        required: true
    responses:
      200:
        description: The list.
        schema:
          $ref: '#/definitions/DiscoveryListDTO'
      404:
        description: List not found.
    """
    try:
        return jsonify(discovery_service().get_list(list_id).model_dump(mode="json"))
    except DiscoveryListNotFoundError as e:
        return jsonify({"error": str(e)}), 404

@discovery_bp.route('/discovery-lists/<list_id>', methods=['PATCH'])
def update_discovery_list_route(list_id):
    """
    Update a discovery list
    ---
    tags:
      - Discovery Lists
    parameters:
      - in: path
        name: list_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/UpdateDiscoveryListRequest'
    responses:
      200:
        description: The updated list.
      400:
        description: Invalid request data.
      404:
        description: List not found.
    """
    try:
        req_data = UpdateDiscoveryListRequest.model_validate_json(request.data or b"{}")
        updated = discovery_service().update_list(list_id, req_data)
        return jsonify(updated.model_dump(mode="json"))
    except ValidationError as e:
        return _validation_error(e)
    except DiscoveryListNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except Exception as e:
        logger.exception("Failed to update discovery list '%s'", list_id)
        return jsonify({"error": str(e)}), 500

@discovery_bp.route('/discovery-lists/<list_id>', methods=['DELETE'])
def delete_discovery_list_route(list_id):
    """
    Delete a discovery list
    ---
    tags:
      - Discovery Lists
    parameters:
      - in: path
        name: list_id
        type: string
        required: true
    responses:
      204:
        description: Deleted.
      404:
        description: List not found.
    """
    try:
        discovery_service().delete_list(list_id)
        return "", 204
    except DiscoveryListNotFoundError as e:
        return jsonify({"error": str(e)}), 404

@discovery_bp.route('/discovery-lists/<list_id>/games', methods=['GET'])
def run_discovery_list_route(list_id):
    """
    Run a saved discovery list against the current catalog
    ---
    tags:
      - Discovery Lists
    parameters:
      - in: path
        name: list_id
        type: string
        required: true
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
        description: One page of matching games plus the list itself.
      404:
        description: List not found.
    """
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 20, type=int)
    try:
        return jsonify(discovery_service().run_list(list_id, page, per_page))
    except DiscoveryListNotFoundError as e:
        return jsonify({"error": str(e)}), 404
