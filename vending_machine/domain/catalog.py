"""Currency catalog lookups"""

from typing import Optional, Sequence
from vending_machine.domain.models import Currency


def lookup_currency(currencies: Sequence[Currency], code: str) -> Optional[Currency]:
    """Find a currency by exact, case-sensitive abbreviation. Returns None if unknown."""
    return next((c for c in currencies if c.abbreviation == code), None)


def has_unit_coin(currency: Currency) -> bool:
    """Whether every whole amount can be represented with this currency's coins"""
    return any(coin.value == 1 for coin in currency.coins)
