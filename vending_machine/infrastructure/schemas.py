"""Pydantic schemas for currency definition file validation"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator

from vending_machine.domain.models import Coin, Currency
from vending_machine.utils.money_utils import AMOUNT_PLACEHOLDER


class CoinSchema(BaseModel):
    """Single coin in a currency definition"""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, description="Display name of the coin")
    value: int = Field(..., gt=0, strict=True, description="Denomination in minor units")

    def to_domain(self) -> Coin:
        return Coin(name=self.name, value=self.value)


class CurrencySchema(BaseModel):
    """Currency definition: code, coins, display format and minor-unit divisor"""

    model_config = ConfigDict(extra="ignore")

    abbreviation: str = Field(..., min_length=1, description="ISO 4217 code")
    coins: List[CoinSchema] = Field(..., min_length=1)
    format: str = Field(..., description="Display template containing <AMOUNT>")
    divisor: int = Field(..., gt=0, strict=True, description="Minor units per major unit")

    @field_validator("format")
    @classmethod
    def format_has_single_placeholder(cls, value: str) -> str:
        if value.count(AMOUNT_PLACEHOLDER) != 1:
            raise ValueError(f"must contain {AMOUNT_PLACEHOLDER} exactly once")
        return value

    @field_validator("coins")
    @classmethod
    def coin_names_unique(cls, value: List[CoinSchema]) -> List[CoinSchema]:
        names = [coin.name for coin in value]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate coin names: {', '.join(duplicates)}")
        return value

    def to_domain(self) -> Currency:
        return Currency(
            abbreviation=self.abbreviation,
            coins=tuple(coin.to_domain() for coin in self.coins),
            format=self.format,
            divisor=self.divisor,
        )


class CurrencyFileSchema(RootModel[List[CurrencySchema]]):
    """Top-level currency file: an ordered array of currency definitions"""

    @model_validator(mode="after")
    def abbreviations_unique(self) -> "CurrencyFileSchema":
        codes = [currency.abbreviation for currency in self.root]
        duplicates = sorted({code for code in codes if codes.count(code) > 1})
        if duplicates:
            raise ValueError(f"duplicate currency abbreviations: {', '.join(duplicates)}")
        return self
