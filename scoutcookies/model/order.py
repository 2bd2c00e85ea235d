# scoutcookies/model/order.py
from datetime import datetime

from ..extensions import db
from .types import GUID, new_id

ORDER_STATUSES = ("pending", "paid", "failed", "cancelled")


class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(GUID(), primary_key=True, default=new_id)
    scout_id = db.Column(GUID(), db.ForeignKey("scouts.id"), nullable=False, index=True)

    # Always the sum of items quantity * price; recomputed on every write path
    total = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    status = db.Column(db.String(50), nullable=False, default="pending", index=True)
    stripe_payment_intent_id = db.Column(db.String(255), nullable=True, index=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    items = db.relationship(
        "OrderItem",
        backref="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderItem.created_at.asc()",
    )

    @property
    def short_code(self) -> str:
        return str(self.id)[:8]

    def as_api(self):
        return {
            "id": str(self.id),
            "scout_id": str(self.scout_id),
            "total": float(self.total or 0),
            "status": self.status,
            "stripe_payment_intent_id": self.stripe_payment_intent_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "items": [i.as_api() for i in self.items],
        }


class OrderItem(db.Model):
    __tablename__ = "order_items"

    id = db.Column(GUID(), primary_key=True, default=new_id)
    order_id = db.Column(GUID(), db.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)

    cookie_type = db.Column(db.String(255), nullable=False)  # free-text copy of the catalog name
    quantity = db.Column(db.Integer, nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def as_api(self):
        return {
            "id": str(self.id),
            "cookie_type": self.cookie_type,
            "quantity": self.quantity,
            "price": float(self.price or 0),
        }
