"""
FleetBoard Flask Application.

Main entry point for the web application. Initializes:
- Database schema
- API routes
- Error handlers

Usage:
    python -m fleetboard.app

Or with gunicorn:
    gunicorn "fleetboard.app:create_app()"
"""

import logging
import os
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from fleetboard.config import config
from fleetboard.models import init_db, init_engine
from fleetboard.api import aircraft_bp, routes_bp, timeline_bp, metrics_bp
from fleetboard.api.payloads import PayloadError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None, seed_data: bool = False) -> Flask:
    """
    Application factory for Flask.

    Args:
        database_url: Database to bind instead of DATABASE_URL.
                      Tests pass 'sqlite://' for a private in-memory database.
        seed_data: Load the sample fleet when the database is empty.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = config.secret_key
    app.json.sort_keys = False

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    # Initialize database
    if database_url:
        init_engine(database_url, echo=config.debug)
    logger.info('Initializing database...')
    init_db()

    if seed_data:
        from fleetboard.seed import seed_if_empty
        seed_if_empty()

    # Register API blueprints
    app.register_blueprint(aircraft_bp)
    app.register_blueprint(routes_bp)
    app.register_blueprint(timeline_bp)
    app.register_blueprint(metrics_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(PayloadError)
    def bad_request(e):
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return {'error': 'Method not allowed'}, 405

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app(seed_data=os.environ.get('SEED_SAMPLE_DATA', '0') == '1')

    # Get port from environment or default
    port = int(os.environ.get('PORT', 5000))

    logger.info(f'Starting FleetBoard on http://localhost:{port}')
    logger.info(f'Timeline: http://localhost:{port}/api/timeline')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
    )


if __name__ == '__main__':
    run_development_server()
