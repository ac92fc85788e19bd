from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from staffhub.core.exceptions import ValidationError

CENTS = Decimal("0.01")


def parse_amount(value: Any, message: str, allow_negative: bool = False) -> Decimal:
    """Parse a money amount to a two-place Decimal or raise ValidationError(message)."""
    if value is None or isinstance(value, bool):
        raise ValidationError(message)
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(message)
    if not amount.is_finite():
        raise ValidationError(message)
    if amount < 0 and not allow_negative:
        raise ValidationError(message)
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def require_month(month: int) -> int:
    if month is None or not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return int(month)


def require_year(year: int) -> int:
    if year is None or int(year) < 1:
        raise ValidationError("Year must be a positive number")
    return int(year)
