"""Domain models - pure Python dataclasses representing change-making entities"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Coin:
    """Single coin denomination of a currency"""

    name: str
    value: int  # minor units


@dataclass(frozen=True)
class Currency:
    """Currency definition from the catalog"""

    abbreviation: str
    coins: Tuple[Coin, ...]
    format: str  # contains a single <AMOUNT> placeholder
    divisor: int  # minor units per major unit


@dataclass(frozen=True)
class ChangeStep:
    """Number of coins of one denomination to hand back"""

    coin: Coin
    count: int


# Ordered by descending coin value
ChangeInstructions = List[ChangeStep]


@dataclass(frozen=True)
class VendingMachineOptions:
    """Validated transaction with amounts in minor units"""

    currency: Currency
    cost: int
    payment: int

    @property
    def change(self) -> int:
        return self.payment - self.cost
