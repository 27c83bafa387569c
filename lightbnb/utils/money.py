from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

MINOR_UNITS_PER_MAJOR = 100
# cost_per_night is an int4 column
MAX_MINOR_UNITS = 2**31 - 1
MAX_PRICE = Decimal(MAX_MINOR_UNITS) / MINOR_UNITS_PER_MAJOR

Amount = Union[int, float, str, Decimal]


def to_minor_units(amount: Amount) -> int:
    """
    Converts a major-unit price (dollars) to whole minor units (cents).

    Prices are stored and compared as integer cents; every value that crosses
    into the datastore goes through here. Half a cent rounds up.

    Raises:
        ValueError: if the amount is not a finite number or does not fit
            in the cents column.
    """
    if isinstance(amount, bool):
        raise ValueError(f"Invalid price: {amount!r}")
    try:
        # str() first so 19.99 stays 19.99 rather than its binary approximation
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid price: {amount!r}")
    if not value.is_finite():
        raise ValueError(f"Invalid price: {amount!r}")
    try:
        cents = (value * MINOR_UNITS_PER_MAJOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Invalid price: {amount!r}")
    if abs(cents) > MAX_MINOR_UNITS:
        raise ValueError(f"Price out of range: {amount!r}")
    return int(cents)
