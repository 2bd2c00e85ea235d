from flask import request, jsonify, Response

from . import bp
from ..catalog import COOKIE_TYPES
from ..errors import BadRequest
from ..qr import QRPayloadError, encode_payload, render_png
from ..utils.api import api_ok


@bp.get("")
def list_cookies():
    return jsonify(api_ok("cookies", data={"cookies": [c.as_api() for c in COOKIE_TYPES]})), 200


@bp.get("/qr")
def cookie_qr():
    """PNG label for a box: ?cookie_type=..&quantity=..&price=.."""
    args = request.args
    try:
        quantity = int(args.get("quantity", "1"))
    except ValueError:
        raise BadRequest("quantity must be a positive integer") from None
    try:
        payload = encode_payload(args.get("cookie_type", ""), quantity, args.get("price", ""))
    except QRPayloadError as e:
        raise BadRequest(str(e)) from e

    return Response(render_png(payload), mimetype="image/png")
