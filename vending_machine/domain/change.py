"""Change engine - core logic for making change"""

from typing import Iterable, List
from vending_machine.domain.models import Coin, Currency, ChangeStep, ChangeInstructions
from vending_machine.domain.exceptions import IncompleteChangeError


def make_change(amount: int, coins: Iterable[Coin]) -> ChangeInstructions:
    """
    Make change for an amount using the greedy strategy.

    The greedy solution won't always tender the minimum number of coins for an
    arbitrary coinage system. Most real world coinage systems are "canonical",
    which means the greedy and optimal solutions always agree.

    Requirements:
    - Steps ordered by descending coin value
    - Only denominations actually used are emitted (count >= 1)
    - Pure: no state, no I/O

    Args:
        amount: Change owed in minor units (non-negative)
        coins: Coin denominations, in any order

    Returns:
        List of ChangeStep objects. Their total may fall short of ``amount``
        when the coin set cannot represent it; see make_exact_change.

    Example:
        163 cents in USD → [Quarter x6, Dime x1, Penny x3]
    """
    # Stable sort keeps catalog order among equal values
    coins_by_value = sorted(coins, key=lambda c: c.value, reverse=True)

    instructions: List[ChangeStep] = []
    remaining = amount
    for coin in coins_by_value:
        count = remaining // coin.value
        if count > 0:
            instructions.append(ChangeStep(coin=coin, count=count))
            remaining -= count * coin.value

    return instructions


def change_total(instructions: ChangeInstructions) -> int:
    """Total value of change instructions in minor units"""
    return sum(step.coin.value * step.count for step in instructions)


def make_exact_change(amount: int, currency: Currency) -> ChangeInstructions:
    """
    Make change in a currency, refusing to under-deliver.

    Raises:
        IncompleteChangeError: When the currency's coins leave a remainder
    """
    instructions = make_change(amount, currency.coins)

    remaining = amount - change_total(instructions)
    if remaining != 0:
        raise IncompleteChangeError(amount, remaining)

    return instructions
