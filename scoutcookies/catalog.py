"""Static cookie catalog.

Line items keep a free-text copy of the name, so nothing here is
referenced from the database.
"""
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from .utils.money import D, round_money


@dataclass(frozen=True)
class CookieType:
    name: str
    description: str
    price: Decimal
    image: Optional[str] = None

    def as_api(self):
        return {
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
            "image": self.image,
        }


COOKIE_TYPES = (
    CookieType("Thin Mints",
               "Crispy cookies layered with chocolate and infused with a refreshing mint flavor",
               Decimal("5.00")),
    CookieType("Caramel deLites/Samoas",
               "Crispy cookies layered with caramel, sprinkled with toasted coconut and striped with chocolate",
               Decimal("5.00")),
    CookieType("Peanut Butter Patties/Tagalongs",
               "Crispy cookies layered with peanut butter and covered with chocolate",
               Decimal("5.00")),
    CookieType("Do-si-dos/Peanut Butter Sandwich",
               "Crispy oatmeal sandwich cookies with peanut butter filling",
               Decimal("5.00")),
    CookieType("Trefoils/Shortbread",
               "Traditional shortbread cookies inspired by the original Girl Scout recipe",
               Decimal("5.00")),
    CookieType("Lemon-Ups",
               "Crispy lemon cookies with inspiring messages to lift your spirits",
               Decimal("5.00")),
    CookieType("Toast-Yay!",
               "French toast-inspired cookies with cinnamon and sweet icing",
               Decimal("5.00")),
    CookieType("Adventurefuls",
               "Brownie-inspired cookies with caramel-flavored crème and sea salt",
               Decimal("5.00")),
)


def get_cookie_by_name(name) -> Optional[CookieType]:
    wanted = (name or "").strip().lower()
    for cookie in COOKIE_TYPES:
        if cookie.name.lower() == wanted:
            return cookie
    return None


def format_cookie_name(name: str) -> str:
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), name or "")


def calculate_order_total(items: Iterable) -> Decimal:
    """Sum of quantity * price over dicts or objects carrying both."""
    total = Decimal("0")
    for item in items:
        if isinstance(item, dict):
            qty, price = item["quantity"], item["price"]
        else:
            qty, price = item.quantity, item.price
        total += D(price) * int(qty)
    return round_money(total)
