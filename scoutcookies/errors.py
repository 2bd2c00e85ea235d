# scoutcookies/errors.py
from flask import jsonify
from werkzeug.exceptions import HTTPException

from .extensions import jwt
from .utils.api import api_error


class ApiError(Exception):
    """Client-facing failure rendered in the standard error envelope."""
    status_code = 400

    def __init__(self, message, status_code=None, data=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.data = data


class BadRequest(ApiError):
    status_code = 400


class Unauthorized(ApiError):
    status_code = 401


class NotFound(ApiError):
    status_code = 404


def err(msg, status=400, data=None):
    r = jsonify(api_error(msg, data)); r.status_code = status; return r


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def _api_error(e):
        return err(e.message, e.status_code, e.data)

    @app.errorhandler(HTTPException)
    def _http_error(e):
        return err(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e):
        app.logger.exception("Unhandled error: %s", e)
        return err("Internal server error", 500)


# bearer token failures all look the same to clients
@jwt.unauthorized_loader
def _missing_token(reason):
    return err("Unauthorized", 401)


@jwt.invalid_token_loader
def _invalid_token(reason):
    return err("Unauthorized", 401)


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return err("Unauthorized", 401)
