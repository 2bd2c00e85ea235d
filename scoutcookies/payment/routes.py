from flask import request, jsonify

from . import bp
from ..services import payment_service
from ..utils.api import api_ok


@bp.post("/webhook")
def webhook():
    # signature covers the exact bytes, so read the raw body
    payload = request.get_data()
    signature = request.headers.get("Stripe-Signature")

    event = payment_service.construct_event(payload, signature)
    payment_service.handle_event(event)
    return jsonify(api_ok("received", data={"received": True})), 200
