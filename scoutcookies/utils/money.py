# scoutcookies/utils/money.py

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

Money = Decimal

CENT = Decimal("0.01")

# largest value a Numeric(10, 2) column holds
MAX_AMOUNT = Decimal("99999999.99")


def D(x) -> Money:
    return x if isinstance(x, Decimal) else Decimal(str(x or "0"))


def round_money(x) -> Money:
    return D(x).quantize(CENT, rounding=ROUND_HALF_UP)


def to_minor_units(x) -> int:
    """Dollars to cents, half-up."""
    return int((round_money(x) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def parse_positive_money(value):
    """Amount rounded to cents when it is positive and fits a money column; None otherwise."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount.adjusted() > 7:
        return None
    amount = round_money(amount)
    if amount <= 0 or amount > MAX_AMOUNT:
        return None
    return amount
