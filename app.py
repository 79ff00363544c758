from flask import Flask, request, jsonify
from typing import Optional
import logging
from config_manager import get_config
from errors import (
    EztvError,
    EmptyResponseError,
    EpisodeNotFoundError,
    FetchError,
    InvalidArgumentError,
    MissingArgumentError,
    ShowNotFoundError,
    UnimplementedError,
)
from scraper import EztvScraper

# Get configuration
config = get_config()

# Konfiguriere Logging
level_name = str(config.get('logging.level', 'INFO')).upper()
logging_level = getattr(logging, level_name, logging.INFO)
logging.basicConfig(
    level=logging_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidArgumentError: 400,
    MissingArgumentError: 400,
    EmptyResponseError: 404,
    ShowNotFoundError: 404,
    EpisodeNotFoundError: 404,
    FetchError: 502,
    UnimplementedError: 501,
}


def _error_response(error: EztvError):
    status = ERROR_STATUS.get(type(error), 500)
    return jsonify({'status': 'error', 'kind': error.kind, 'error': str(error)}), status


def create_app(scraper: Optional[EztvScraper] = None) -> Flask:
    """Build the JSON API around a scraper instance."""
    app = Flask(__name__)
    app.config['SCRAPER'] = scraper or EztvScraper(config)

    @app.errorhandler(EztvError)
    def handle_scraper_error(error: EztvError):
        logger.warning(f"{request.path} failed with {error.kind}: {error}")
        return _error_response(error)

    @app.route('/api/shows/search')
    def search_shows():
        keyword = request.args.get('q', '')
        shows = app.config['SCRAPER'].search_show(keyword)
        return jsonify({'status': 'success', 'count': len(shows), 'items': [s.to_dict() for s in shows]})

    @app.route('/api/shows/details')
    def show_details():
        path = request.args.get('path', '')
        show = app.config['SCRAPER'].get_show_details(path)
        return jsonify({'status': 'success', 'show': show.to_dict()})

    @app.route('/api/episodes/details')
    def episode_details():
        path = request.args.get('path', '')
        episode = app.config['SCRAPER'].get_episode_details(path)
        return jsonify({'status': 'success', 'episode': episode.to_dict()})

    return app


if __name__ == '__main__':
    port = int(config.get('server.port', 5000))
    debug = bool(config.get('server.debug', False))
    host = config.get('server.host', '127.0.0.1')

    logger.info(f"Starting server on {host}:{port} (debug={debug})")
    create_app().run(host=host, port=port, debug=debug, use_reloader=False)
