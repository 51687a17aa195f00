"""Command line argument parsing"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from vending_machine.domain.catalog import lookup_currency
from vending_machine.domain.exceptions import CurrencyNotFoundError
from vending_machine.domain.models import Currency, VendingMachineOptions
from vending_machine.utils.money_utils import to_minor_units


@dataclass(frozen=True)
class ParseResult:
    """Outcome of argument parsing: either options or a failure to report"""

    options: Optional[VendingMachineOptions] = None
    error: Optional[str] = None
    show_usage: bool = False

    @property
    def ok(self) -> bool:
        return self.options is not None


def _failure(error: Optional[str] = None) -> ParseResult:
    return ParseResult(error=error, show_usage=True)


def _parse_amount(raw: Optional[str]) -> Optional[Decimal]:
    """Parse a positive, finite decimal amount. Returns None if unusable."""
    if raw is None:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return None
    if not value.is_finite() or value <= 0:
        return None
    return value


def parse_args(
    argv: Sequence[str],
    currencies: Sequence[Currency],
    default_currency: str = "USD",
) -> ParseResult:
    """
    Parse command line tokens into VendingMachineOptions.

    Recognized options:
    - --item-cost <decimal>: required, major units
    - --payment <decimal>: required, major units
    - --currency <code>: optional, resolved against the catalog
    - --help / -h: request usage text

    Unknown tokens are ignored. The first error encountered is reported.
    Nothing is printed and the process is never exited here; the caller
    decides what to do with a failed ParseResult.
    """
    tokens = list(argv)
    currency_code = default_currency
    cost: Optional[Decimal] = None
    payment: Optional[Decimal] = None
    cost_raw = payment_raw = ""
    help_requested = False

    while tokens:
        arg = tokens.pop(0)

        if arg == "--item-cost":
            raw = tokens.pop(0) if tokens else None
            cost = _parse_amount(raw)
            if cost is None:
                return _failure(f"Unable to parse '{raw or ''}' as item_cost.")
            cost_raw = raw

        elif arg == "--payment":
            raw = tokens.pop(0) if tokens else None
            payment = _parse_amount(raw)
            if payment is None:
                return _failure(f"Unable to parse '{raw or ''}' as payment_amount.")
            payment_raw = raw

        elif arg == "--currency":
            raw = tokens.pop(0) if tokens else None
            if not raw:
                return _failure(f"Unable to parse '{raw or ''}' as currency_code.")
            currency_code = raw

        elif arg in ("--help", "-h"):
            help_requested = True

    currency = lookup_currency(currencies, currency_code)
    if currency is None:
        return _failure(str(CurrencyNotFoundError(currency_code)))

    if cost is None or payment is None or help_requested:
        return _failure()

    # Amounts too large for the decimal exponent range are unparseable
    try:
        cost_minor = to_minor_units(cost, currency.divisor)
    except ArithmeticError:
        return _failure(f"Unable to parse '{cost_raw}' as item_cost.")
    try:
        payment_minor = to_minor_units(payment, currency.divisor)
    except ArithmeticError:
        return _failure(f"Unable to parse '{payment_raw}' as payment_amount.")

    return ParseResult(
        options=VendingMachineOptions(
            currency=currency,
            cost=cost_minor,
            payment=payment_minor,
        )
    )
