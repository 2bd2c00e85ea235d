# scoutcookies/qr.py
"""Cookie box QR payloads: ``COOKIE:<type>:<quantity>:<price>``."""
import io
from dataclasses import dataclass
from decimal import Decimal

import segno

from .utils.money import parse_positive_money

PREFIX = "COOKIE"
SEPARATOR = ":"


class QRPayloadError(ValueError):
    pass


@dataclass(frozen=True)
class CookieScan:
    cookie_type: str
    quantity: int
    price: Decimal

    def as_item(self):
        return {"cookie_type": self.cookie_type, "quantity": self.quantity, "price": self.price}


def _parse_quantity(raw):
    raw = (raw or "").strip()
    if not raw.isdecimal():
        return None
    qty = int(raw)
    return qty if qty > 0 else None


def encode_payload(cookie_type: str, quantity: int, price) -> str:
    cookie_type = (cookie_type or "").strip()
    if not cookie_type:
        raise QRPayloadError("cookie type is required")
    # no escaping in the format; a colon would shift every later field
    if SEPARATOR in cookie_type:
        raise QRPayloadError("cookie type may not contain ':'")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise QRPayloadError("quantity must be a positive integer")
    amount = parse_positive_money(price)
    if amount is None:
        raise QRPayloadError("price must be a positive amount")
    return SEPARATOR.join([PREFIX, cookie_type, str(quantity), f"{amount:.2f}"])


def decode_payload(data) -> CookieScan:
    if not isinstance(data, str):
        raise QRPayloadError("payload must be text")
    parts = data.strip().split(SEPARATOR)
    if len(parts) != 4 or parts[0] != PREFIX:
        raise QRPayloadError("not a cookie QR code")

    _, cookie_type, qty_raw, price_raw = parts
    cookie_type = cookie_type.strip()
    if not cookie_type:
        raise QRPayloadError("missing cookie type")
    quantity = _parse_quantity(qty_raw)
    if quantity is None:
        raise QRPayloadError("quantity must be a positive integer")
    price = parse_positive_money(price_raw)
    if price is None:
        raise QRPayloadError("price must be a positive amount")
    return CookieScan(cookie_type=cookie_type, quantity=quantity, price=price)


def render_png(payload: str, scale: int = 8, border: int = 2) -> bytes:
    buf = io.BytesIO()
    segno.make(payload, error="m").save(buf, kind="png", scale=scale, border=border)
    return buf.getvalue()
