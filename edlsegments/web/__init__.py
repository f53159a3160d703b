"""Flask application factory for the EDL Segments web API."""

from flask import Flask, jsonify

from edlsegments.config import AppConfig
from edlsegments.library import InMemoryLibrary, ItemRepository, load_library
from edlsegments.provider import EdlSegmentProvider


def create_app(
    config: AppConfig | None = None,
    items: ItemRepository | None = None,
) -> Flask:
    config = config or AppConfig()
    if items is None:
        items = load_library(config.library) if config.library else InMemoryLibrary()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = 16 * 1024 * 1024  # 16 MB of EDL text
    app.extensions["edl_provider"] = EdlSegmentProvider(items, config=config.provider)

    from edlsegments.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(413)
    def request_entity_too_large(error):
        return jsonify({"error": "EDL text too large"}), 413

    return app
