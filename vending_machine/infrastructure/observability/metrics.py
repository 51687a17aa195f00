"""Prometheus metrics for transaction outcomes and dispensed coins"""

from pathlib import Path
from prometheus_client import Counter, REGISTRY, write_to_textfile

from vending_machine.domain.models import ChangeInstructions, Currency

# Transaction metrics
transaction_counter = Counter(
    "vending_machine_transactions_total",
    "Total transactions processed",
    ["outcome"],  # success | invalid_arguments | insufficient_payment | incomplete_change | config_error
)

# Dispensed coin metrics
coins_dispensed_counter = Counter(
    "vending_machine_coins_dispensed_total",
    "Coins handed back as change",
    ["currency", "coin"],
)


def record_transaction(outcome: str) -> None:
    """Record the outcome of a single transaction"""
    transaction_counter.labels(outcome=outcome).inc()


def record_change(instructions: ChangeInstructions, currency: Currency) -> None:
    """Record coin counts for dispensed change"""
    for step in instructions:
        coins_dispensed_counter.labels(currency=currency.abbreviation, coin=step.coin.name).inc(step.count)


def export_metrics(path: Path) -> None:
    """Write the registry in node-exporter textfile collector format"""
    write_to_textfile(str(path), REGISTRY)
