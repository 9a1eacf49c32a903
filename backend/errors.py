import enum
import logging

from flask import request
from werkzeug.exceptions import HTTPException

from models import db


logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    """Outcome of a failed operation, mapped to a status code at the route."""

    VALIDATION = 400
    AUTHENTICATION = 401
    CONFLICT = 409
    UNEXPECTED = 500

    @property
    def status(self) -> int:
        return self.value


def status_only(status: int):
    return "", status


def register_error_handlers(app):

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        # 404 / 405 and friends keep Flask's own responses
        if isinstance(e, HTTPException):
            return e

        logger.exception("Unhandled error on %s %s", request.method, request.path)
        db.session.rollback()
        return status_only(ErrorKind.UNEXPECTED.status)
