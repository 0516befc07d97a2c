import time

from flask import Flask, g, request
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

from locallibrary.config import Config

db = SQLAlchemy()
migrate = Migrate()


def create_app(config_class=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # The store is built once per app and handed to the handlers through
    # app.extensions; tests may pass their own.
    from locallibrary.services.catalog_store import CatalogStore
    app.extensions["catalog_store"] = store if store is not None else CatalogStore(db)

    # Register blueprints
    from locallibrary.routes.main import bp as main_bp
    from locallibrary.routes.book_instances import bp as book_instances_bp
    from locallibrary.routes.errors import register_error_handlers

    app.register_blueprint(main_bp)
    app.register_blueprint(book_instances_bp, url_prefix="/catalog")
    register_error_handlers(app)

    _register_request_hooks(app)

    with app.app_context():
        from locallibrary.models import Author, Book, BookInstance, Genre  # noqa: F401

    return app


def _register_request_hooks(app):
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_and_harden(response):
        # Baseline security headers
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
        response.headers.setdefault("Referrer-Policy", "no-referrer")

        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        app.logger.info(
            "%s %s %s %.1f ms", request.method, request.path, response.status_code, elapsed_ms
        )
        return response
