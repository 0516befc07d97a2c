"""Generic error page for HTTP errors and store failures."""

from flask import current_app, render_template, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from locallibrary.services import get_store


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return render_template(
            "error.html",
            title=error.name,
            message=error.description,
            status=error.code,
            error=error if current_app.debug else None,
        ), error.code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        get_store().rollback()
        current_app.logger.exception("Store failure on %s %s", request.method, request.path)
        # Only expose driver messages in debug mode
        message = str(error) if current_app.debug else "Internal Server Error"
        return render_template(
            "error.html",
            title="Error",
            message=message,
            status=500,
            error=error if current_app.debug else None,
        ), 500
