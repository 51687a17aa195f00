"""Console formatting for change instructions and usage text"""

from typing import List

from vending_machine.domain.models import ChangeInstructions, Currency
from vending_machine.utils.money_utils import format_amount

USAGE = """\
Usage:
  vending-machine --item-cost <item_cost> --payment <payment_amount> [--currency <currency_code>]
Options:
  --item-cost: cost of item in dollars
  --payment:   payment amount in dollars
  --currency:  currency ISO 4217 code"""


def usage_lines() -> List[str]:
    return USAGE.splitlines()


def format_change_instructions(instructions: ChangeInstructions, currency: Currency, change: int) -> List[str]:
    """
    Format change instructions as aligned "<Coin>: <count>" lines plus a total.

    Example (USD, 163 cents):
        Quarter: 6
        Dime:    1
        Penny:   3
        Total Change: $1.63
    """
    longest_name = max((len(step.coin.name) for step in instructions), default=0)

    lines = [f"{step.coin.name + ':':<{longest_name + 1}} {step.count}" for step in instructions]
    lines.append(f"Total Change: {format_amount(change, currency)}")
    return lines
