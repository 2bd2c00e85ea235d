# scoutcookies/order/routes.py
from flask import request, jsonify, g
from flask_jwt_extended import get_jwt

from . import bp
from ..errors import BadRequest
from ..qr import QRPayloadError, decode_payload
from ..services import order_service, payment_service
from ..utils.api import api_ok, json_object
from ..utils.decorators import scout_required


def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r


def _scanned_item(qr):
    try:
        return decode_payload(qr).as_item()
    except QRPayloadError as e:
        raise BadRequest("Invalid QR code", data={"reason": str(e)}) from e


@bp.get("")
@scout_required
def list_orders():
    orders = order_service.list_orders(g.scout.id)
    return ok("orders", {
        "orders": [o.as_api() for o in orders],
        "scout_name": get_jwt().get("name") or g.scout.name,
    })


@bp.post("")
@scout_required
def create_order():
    payload = json_object(request)
    order = order_service.create_order(g.scout.id, payload.get("items"))
    return ok("order created", {"order_id": str(order.id), "order": order.as_api()}, status=201)


@bp.post("/scan")
@scout_required
def create_order_from_scan():
    payload = json_object(request)
    item = _scanned_item(payload.get("qr"))
    order = order_service.create_order(g.scout.id, [item])
    return ok("order created", {"order_id": str(order.id), "order": order.as_api()}, status=201)


@bp.get("/<order_id>")
@scout_required
def get_order(order_id):
    return ok("order", {"order": order_service.get_order(g.scout.id, order_id).as_api()})


@bp.put("/<order_id>")
@scout_required
def update_order(order_id):
    payload = json_object(request)
    if payload.get("action") != "add_item":
        raise BadRequest("Invalid action or missing item")

    if payload.get("qr") is not None:
        item = _scanned_item(payload["qr"])
    elif payload.get("item"):
        item = payload["item"]
    else:
        raise BadRequest("Invalid action or missing item")

    order = order_service.append_item(g.scout.id, order_id, item)
    return ok("item added", {"order": order.as_api()})


@bp.post("/<order_id>/cancel")
@scout_required
def cancel_order(order_id):
    order = order_service.cancel_order(g.scout.id, order_id)
    return ok("order cancelled", {"order": order.as_api()})


@bp.post("/<order_id>/checkout")
@scout_required
def checkout(order_id):
    client_secret, intent_id = payment_service.start_checkout(g.scout, order_id)
    return ok("payment intent created", {
        "client_secret": client_secret,
        "payment_intent_id": intent_id,
    })
