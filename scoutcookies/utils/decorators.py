# ------- scoutcookies/utils/decorators.py -------
from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from ..extensions import db
from ..model import Scout, as_uuid
from ..utils.api import api_error


def _current_scout():
    verify_jwt_in_request()
    sid = as_uuid(get_jwt_identity())
    return db.session.get(Scout, sid) if sid else None


def scout_required(fn):
    """Bearer token must name an existing scout; exposed as ``g.scout``."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        scout = _current_scout()
        if not scout:
            return jsonify(api_error("Unauthorized")), 401
        g.scout = scout
        return fn(*args, **kwargs)
    return wrapper
