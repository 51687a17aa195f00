"""Money conversion utilities"""

from decimal import Decimal, ROUND_FLOOR, localcontext
from vending_machine.domain.models import Currency

AMOUNT_PLACEHOLDER = "<AMOUNT>"


def to_minor_units(value: Decimal, divisor: int) -> int:
    """
    Convert a major-unit amount to minor units, rounding down.

    Precision is widened to hold the full product so the floor is exact.

    Raises:
        ArithmeticError: When the product is out of the decimal exponent range
    """
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + len(str(divisor)) + 1
        return int((value * divisor).to_integral_value(rounding=ROUND_FLOOR))


def to_major_units(amount: int, divisor: int) -> Decimal:
    """Convert minor units back to major units (exact for decimal divisors)"""
    with localcontext() as ctx:
        # bit_length // 3 + 1 bounds the decimal digits of amount
        ctx.prec = abs(amount).bit_length() // 3 + divisor.bit_length() + 2
        return Decimal(amount) / Decimal(divisor)


def format_amount(amount: int, currency: Currency) -> str:
    """
    Render a minor-unit amount with the currency's display template.

    The major-unit value is written without padding, so 50 cents in
    "$<AMOUNT>" renders as "$0.5".
    """
    major = to_major_units(amount, currency.divisor)
    return currency.format.replace(AMOUNT_PLACEHOLDER, format(major, "f"))
