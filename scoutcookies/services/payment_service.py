# scoutcookies/services/payment_service.py
"""Stripe bridge: PaymentIntent creation and webhook events."""
import stripe
from flask import current_app

from ..errors import BadRequest
from ..extensions import db
from ..utils.money import to_minor_units
from . import order_service

# webhook event type -> order status
PAYMENT_EVENT_STATUS = {
    "payment_intent.succeeded": "paid",
    "payment_intent.payment_failed": "failed",
}


def create_payment_intent(order, scout_id, scout_email):
    cfg = current_app.config
    return stripe.PaymentIntent.create(
        amount=to_minor_units(order.total),
        currency=cfg["PAYMENT_CURRENCY"],
        metadata={
            "orderId": str(order.id),
            "scoutId": str(scout_id),
            "scoutEmail": scout_email or "",
        },
        description=f"Girl Scout Cookie Order #{order.short_code}",
        api_key=cfg["STRIPE_SECRET_KEY"],
    )


def start_checkout(scout, order_id):
    """Create an intent for an unpaid order and remember its id on the order.

    Returns ``(client_secret, payment_intent_id)``.
    """
    order = order_service.get_unpaid_order(scout.id, order_id)

    try:
        intent = create_payment_intent(order, scout.id, scout.email)
    except stripe.StripeError:
        current_app.logger.exception("PaymentIntent creation failed for order %s", order.id)
        raise

    order.stripe_payment_intent_id = intent.id
    db.session.commit()

    current_app.logger.info("PaymentIntent %s created for order %s", intent.id, order.id)
    return intent.client_secret, intent.id


def construct_event(payload, signature):
    if not signature:
        raise BadRequest("Invalid signature")
    try:
        return stripe.Webhook.construct_event(
            payload, signature, current_app.config["STRIPE_WEBHOOK_SECRET"]
        )
    except (ValueError, stripe.SignatureVerificationError) as e:
        current_app.logger.warning("Webhook signature verification failed: %s", e)
        raise BadRequest("Invalid signature") from e


def handle_event(event):
    """Apply a verified event; returns the updated order or None."""
    status = PAYMENT_EVENT_STATUS.get(event.type)
    if status is None:
        current_app.logger.info("Unhandled event type: %s", event.type)
        return None

    intent_id = event.data.object.id
    order = order_service.set_status_by_payment_intent(intent_id, status)
    if order is None:
        current_app.logger.info("No order for payment intent %s (%s)", intent_id, event.type)
        return None

    current_app.logger.info("Order %s marked as %s", order.id, status)
    return order
