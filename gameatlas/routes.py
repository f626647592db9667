from flask import Blueprint
from gameatlas.controllers.catalog_controller import catalog_bp
from gameatlas.controllers.discovery_controller import discovery_bp
from gameatlas.controllers.match_controller import match_bp

api_bp = Blueprint('api', __name__)

api_bp.register_blueprint(catalog_bp)
api_bp.register_blueprint(match_bp, url_prefix='/matches')
api_bp.register_blueprint(discovery_bp)
