# utils/errors.py
import enum
import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from extensions import db

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CAPACITY = "capacity"
    CONFLICT = "conflict"


STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CAPACITY: 400,
    ErrorKind.CONFLICT: 400,
}

_missing = set(ErrorKind) - set(STATUS_CODES)
if _missing:
    raise RuntimeError(f"No HTTP status mapped for error kinds: {sorted(k.name for k in _missing)}")


class BudgetError(Exception):
    """
    A request-local failure with a message that is safe to show to the user.
    Subclasses pin the kind; the HTTP layer turns it into {"error": message}.
    """
    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self):
        return STATUS_CODES[self.kind]

    def to_dict(self):
        return {"error": self.message}


class ValidationError(BudgetError):
    kind = ErrorKind.VALIDATION


class NotFoundError(BudgetError):
    kind = ErrorKind.NOT_FOUND


class CapacityError(BudgetError):
    kind = ErrorKind.CAPACITY


class ConflictError(BudgetError):
    kind = ErrorKind.CONFLICT


class CodeSpaceExhaustedError(RuntimeError):
    """No unused room code was found within the configured number of attempts."""


def register_error_handlers(app):
    @app.errorhandler(BudgetError)
    def handle_budget_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(SQLAlchemyError)
    def database_error(error):
        db.session.rollback()
        logger.exception("Database error while handling request")
        return jsonify({"error": "Internal server error"}), 500

    @app.errorhandler(Exception)
    def internal_error(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description}), error.code
        db.session.rollback()
        logger.exception("Unhandled error while handling request")
        return jsonify({"error": "Internal server error"}), 500
