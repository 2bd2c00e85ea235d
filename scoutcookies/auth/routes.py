from flask import request, jsonify, g

from . import bp
from ..services import scout_service
from ..utils.api import api_ok, api_error, json_object
from ..utils.decorators import scout_required


@bp.post("/login")
def login():
    data = json_object(request)
    email = data.get("email") or ""
    password = data.get("password") or ""
    if not isinstance(email, str) or not isinstance(password, str) or not email.strip() or not password:
        return jsonify(api_error("Email and password are required")), 400

    scout = scout_service.authenticate(email, password)
    if not scout:
        return jsonify(api_error("Invalid email or password")), 401

    return jsonify(api_ok(
        "You've logged in successfully",
        data={
            "token": scout_service.issue_token(scout),
            "user": scout.as_dict(),
        }
    )), 200


@bp.get("/me")
@scout_required
def me():
    return jsonify(api_ok("OK", data={"user": g.scout.as_dict()})), 200
