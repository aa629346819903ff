from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any


CENT = Decimal('0.01')
ZERO = Decimal('0.00')


def to_money(value: Any) -> Decimal:
    """Coerce to a 2-place Decimal, rounding half-up like the database column does."""
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f'Invalid monetary amount: {value!r}') from e


def percentage(part: int | Decimal, whole: int | Decimal) -> Decimal:
    if not whole:
        return ZERO
    return (Decimal(part) / Decimal(whole) * 100).quantize(CENT, rounding=ROUND_HALF_UP)
