"""Pytest fixtures for testing"""

import json
import pytest
from pathlib import Path
from typing import Callable, List
from vending_machine.config import Settings
from vending_machine.domain.models import Coin, Currency
from vending_machine.infrastructure.currency_file import BUNDLED_CURRENCIES_FILE


@pytest.fixture
def usd() -> Currency:
    """US dollar with quarters, dimes, nickels and pennies"""
    return Currency(
        abbreviation="USD",
        coins=(
            Coin("Quarter", 25),
            Coin("Dime", 10),
            Coin("Nickel", 5),
            Coin("Penny", 1),
        ),
        format="$<AMOUNT>",
        divisor=100,
    )


@pytest.fixture
def no_penny() -> Currency:
    """Currency without a unit coin, so odd amounts can't be changed exactly"""
    return Currency(
        abbreviation="XNP",
        coins=(Coin("Dime", 10), Coin("Nickel", 5)),
        format="<AMOUNT> XNP",
        divisor=100,
    )


@pytest.fixture
def catalog(usd: Currency, no_penny: Currency) -> tuple[Currency, ...]:
    return (usd, no_penny)


@pytest.fixture
def write_currency_file(tmp_path: Path) -> Callable[[object], Path]:
    """Write currency definitions (JSON-serializable data or raw text) to a temp file"""

    def _write(data: object, name: str = "currencies.json") -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def currency_definitions() -> List[dict]:
    """Raw currency file content with one canonical and one penny-less currency"""
    return [
        {
            "abbreviation": "USD",
            "coins": [
                {"name": "Quarter", "value": 25},
                {"name": "Dime", "value": 10},
                {"name": "Nickel", "value": 5},
                {"name": "Penny", "value": 1},
            ],
            "format": "$<AMOUNT>",
            "divisor": 100,
        },
        {
            "abbreviation": "XNP",
            "coins": [
                {"name": "Dime", "value": 10},
                {"name": "Nickel", "value": 5},
            ],
            "format": "<AMOUNT> XNP",
            "divisor": 100,
        },
    ]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings using the bundled currency file and a temp metrics file"""
    return Settings(
        currencies_file=BUNDLED_CURRENCIES_FILE,
        default_currency="USD",
        log_level="WARNING",
        metrics_textfile=tmp_path / "vending_machine.prom",
    )
