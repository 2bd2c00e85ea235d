# scoutcookies/model/scout.py
from datetime import datetime

from ..extensions import db
from .types import GUID, new_id


def normalize_email(email) -> str:
    return (email or "").strip().lower()


class Scout(db.Model):
    __tablename__ = "scouts"

    id = db.Column(GUID(), primary_key=True, default=new_id)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)  # always case-folded
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    orders = db.relationship("Order", backref="scout", lazy="dynamic")

    def as_dict(self):
        return {
            "id": str(self.id),
            "email": self.email,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
