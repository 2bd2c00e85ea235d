# scoutcookies/services/order_service.py
from decimal import Decimal

from flask import current_app
from sqlalchemy import func

from ..catalog import calculate_order_total
from ..errors import BadRequest, NotFound
from ..extensions import db
from ..model import Order, OrderItem, as_uuid
from ..utils.money import D, parse_positive_money, round_money

CANCELLABLE = ("pending", "failed")


def _parse_quantity(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        qty = value
    elif isinstance(value, float) and value.is_integer():
        qty = int(value)
    elif isinstance(value, str) and value.strip().isdecimal():
        qty = int(value.strip())
    else:
        return None
    return qty if qty > 0 else None


def parse_item(raw) -> dict:
    """Validate one ``{cookie_type, quantity, price}`` line."""
    if not isinstance(raw, dict):
        raise BadRequest("Each item must be an object")
    cookie_type = raw.get("cookie_type")
    cookie_type = cookie_type.strip() if isinstance(cookie_type, str) else ""
    if not cookie_type:
        raise BadRequest("cookie_type is required")
    quantity = _parse_quantity(raw.get("quantity"))
    if quantity is None:
        raise BadRequest("quantity must be a positive integer")
    price = parse_positive_money(raw.get("price"))
    if price is None:
        raise BadRequest("price must be a positive amount")
    return {"cookie_type": cookie_type, "quantity": quantity, "price": price}


def parse_items(raw_items) -> list:
    if not isinstance(raw_items, list) or not raw_items:
        raise BadRequest("Items are required")
    return [parse_item(raw) for raw in raw_items]


def recompute_total(order_id) -> Decimal:
    """Fresh aggregate over the stored lines."""
    total = (
        db.session.query(func.coalesce(func.sum(OrderItem.quantity * OrderItem.price), 0))
        .filter(OrderItem.order_id == order_id)
        .scalar()
    )
    return round_money(D(total))


def list_orders(scout_id):
    return (Order.query
            .filter(Order.scout_id == scout_id)
            .order_by(Order.created_at.desc())
            .all())


def get_order(scout_id, order_id) -> Order:
    oid = as_uuid(order_id)
    order = Order.query.filter(Order.id == oid, Order.scout_id == scout_id).first() if oid else None
    if not order:
        raise NotFound("Order not found")
    return order


def get_unpaid_order(scout_id, order_id, lock=False) -> Order:
    oid = as_uuid(order_id)
    order = None
    if oid:
        q = Order.query.filter(Order.id == oid, Order.scout_id == scout_id, Order.status != "paid")
        if lock:
            q = q.with_for_update()
        order = q.first()
    if not order:
        raise NotFound("Order not found or already paid")
    return order


def create_order(scout_id, raw_items) -> Order:
    items = parse_items(raw_items)

    try:
        order = Order(scout_id=scout_id, status="pending", total=calculate_order_total(items))
        db.session.add(order)
        db.session.flush()

        for it in items:
            db.session.add(OrderItem(order_id=order.id, **it))

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info("Order %s created with %d item(s)", order.id, len(items))
    return order


def append_item(scout_id, order_id, raw_item) -> Order:
    item = parse_item(raw_item)

    try:
        order = get_unpaid_order(scout_id, order_id, lock=True)
        db.session.add(OrderItem(order_id=order.id, **item))
        db.session.flush()

        order.total = recompute_total(order.id)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return order


def cancel_order(scout_id, order_id) -> Order:
    oid = as_uuid(order_id)
    order = None
    if oid:
        order = Order.query.filter(
            Order.id == oid,
            Order.scout_id == scout_id,
            Order.status.in_(CANCELLABLE),
        ).first()
    if not order:
        raise NotFound("Order not found or cannot be cancelled")

    order.status = "cancelled"
    db.session.commit()
    return order


def set_status_by_payment_intent(intent_id, status):
    """Status change driven by the processor; None when no order holds the intent."""
    if not intent_id:
        return None
    order = Order.query.filter_by(stripe_payment_intent_id=intent_id).first()
    if not order:
        return None

    order.status = status
    db.session.commit()
    return order
