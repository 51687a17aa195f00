"""
vending-machine command line entry point.

Takes the payment amount (--payment) and the cost (--item-cost) and prints a
set of instructions for making change. The default currency is USD; other
currencies are selected by ISO 4217 code with --currency and are defined in
the currency file (see VENDING_MACHINE_CURRENCIES_FILE).
"""

import logging
import sys
import time
from typing import List, Optional, Sequence

from vending_machine.cli.args import parse_args
from vending_machine.cli.render import format_change_instructions, usage_lines
from vending_machine.config import Settings, settings as default_settings
from vending_machine.domain.change import make_exact_change
from vending_machine.domain.exceptions import (
    CurrencyConfigError,
    IncompleteChangeError,
    InsufficientPaymentError,
)
from vending_machine.infrastructure.currency_file import load_currencies
from vending_machine.infrastructure.observability.logging import log_transaction, setup_logging
from vending_machine.infrastructure.observability.metrics import export_metrics, record_change, record_transaction
from vending_machine.utils.money_utils import format_amount

logger = logging.getLogger(__name__)


def _print_lines(lines: List[str], stream) -> None:
    for line in lines:
        print(line, file=stream)


def _transact(argv: Sequence[str], settings: Settings) -> int:
    """
    Run one transaction and return the process exit status.

    Flow:
    1. Load currency catalog
    2. Parse and validate arguments
    3. Reject insufficient payment
    4. Make exact change
    5. Print instructions, record metrics and logs
    """
    start_time = time.time()

    # 1. Load currency catalog
    try:
        currencies = load_currencies(settings.currencies_file)
    except CurrencyConfigError as e:
        record_transaction("config_error")
        logger.error(f"Currency configuration error: {e}")
        print(e, file=sys.stderr)
        return 1

    # 2. Parse arguments
    result = parse_args(argv, currencies, settings.default_currency)
    if not result.ok:
        record_transaction("invalid_arguments")
        if result.error:
            print(result.error, file=sys.stderr)
        if result.show_usage:
            _print_lines(usage_lines(), sys.stdout)
        return 1

    options = result.options
    currency = options.currency
    change = options.change

    try:
        # 3. Reject insufficient payment
        if change < 0:
            raise InsufficientPaymentError(options.cost, options.payment)

        # 4. Make change
        instructions = make_exact_change(change, currency)

    except InsufficientPaymentError as e:
        record_transaction("insufficient_payment")
        logger.warning(f"Insufficient payment: {e}", extra={"currency": currency.abbreviation})
        print(e, file=sys.stderr)
        return 1

    except IncompleteChangeError as e:
        record_transaction("incomplete_change")
        logger.warning(f"Incomplete change: {e}", extra={"currency": currency.abbreviation})
        print(
            f"Unable to make exact change for {format_amount(e.amount, currency)} in {currency.abbreviation}; "
            f"{format_amount(e.remaining, currency)} could not be dispensed.",
            file=sys.stderr,
        )
        return 1

    # 5. Output, metrics and logs
    _print_lines(format_change_instructions(instructions, currency, change), sys.stdout)

    record_transaction("success")
    record_change(instructions, currency)
    duration_ms = (time.time() - start_time) * 1000
    log_transaction(
        currency.abbreviation,
        options.cost,
        options.payment,
        "success",
        sum(step.count for step in instructions),
        duration_ms,
    )
    return 0


def run(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    """Process one transaction from command line tokens. Returns the exit status."""
    settings = settings or default_settings
    argv = sys.argv[1:] if argv is None else argv

    setup_logging(settings.log_level, settings.service_name)

    try:
        return _transact(argv, settings)
    finally:
        if settings.metrics_textfile is not None:
            try:
                export_metrics(settings.metrics_textfile)
            except OSError as e:
                logger.warning(f"Unable to write metrics textfile: {e}", extra={"path": str(settings.metrics_textfile)})


def main() -> None:
    sys.exit(run())
