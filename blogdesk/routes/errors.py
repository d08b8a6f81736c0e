# blogdesk/routes/errors.py
from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from blogdesk.errors import APIError, InternalError
from blogdesk.extensions import db
from blogdesk.logging_config import get_logger

logger = get_logger(__name__)

errors_bp = Blueprint("errors", __name__)


def _expose_details():
    return current_app.config.get("EXPOSE_ERROR_DETAILS", False)


@errors_bp.app_errorhandler(APIError)
def handle_api_error(error):
    if error.status_code >= 500:
        db.session.rollback()
        logger.error(f"Internal error: {error.message} ({error.details})")
    return jsonify(error.to_dict(_expose_details())), error.status_code


@errors_bp.app_errorhandler(HTTPException)
def handle_http_exception(error):
    return jsonify({"error": error.description}), error.code


@errors_bp.app_errorhandler(SQLAlchemyError)
def handle_database_error(error):
    db.session.rollback()
    logger.exception("Database error")
    internal = InternalError("Database error", details=str(error))
    return jsonify(internal.to_dict(_expose_details())), internal.status_code


@errors_bp.app_errorhandler(Exception)
def handle_unexpected_error(error):
    db.session.rollback()
    logger.exception("Unexpected error")
    internal = InternalError(details=str(error))
    return jsonify(internal.to_dict(_expose_details())), internal.status_code
