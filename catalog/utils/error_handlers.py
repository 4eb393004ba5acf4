from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException

from catalog.exceptions import CatalogError, ConflictError, NotFoundError
from catalog.utils.responses import error_response

UNEXPECTED_ERROR = "An unexpected error occurred"


def _field_details(error: CatalogError):
    if error.field:
        return {error.field: [error.message]}
    return None


def _debug_message(error):
    if current_app.config.get("EXPOSE_ERROR_DETAILS"):
        return str(error)
    return None


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        return error_response(error.message, 404, details=_field_details(error))

    @app.errorhandler(ConflictError)
    def handle_conflict(error):
        return error_response(error.message, 409, details=_field_details(error))

    @app.errorhandler(CatalogError)
    def handle_catalog_error(error):
        app.logger.error(f"Unmapped catalog condition: {error.message}")
        return error_response(UNEXPECTED_ERROR, 500, message=_debug_message(error))

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        app.logger.warning(f"Integrity error reached the API layer: {error.orig}")
        return error_response("Database integrity error", 409)

    @app.errorhandler(SQLAlchemyError)
    def handle_sqlalchemy_error(error):
        app.logger.error(f"Database error: {error}", exc_info=True)
        return error_response(UNEXPECTED_ERROR, 500, message=_debug_message(error))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_exception(error):
        app.logger.error(f"Unhandled exception: {error}", exc_info=True)
        return error_response(UNEXPECTED_ERROR, 500, message=_debug_message(error))
