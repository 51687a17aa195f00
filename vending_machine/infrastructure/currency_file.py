"""Currency definition file loader"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from pydantic import ValidationError

from vending_machine.infrastructure.schemas import CurrencyFileSchema
from vending_machine.domain.catalog import has_unit_coin
from vending_machine.domain.exceptions import CurrencyConfigNotFoundError, MalformedCurrencyConfigError
from vending_machine.domain.models import Currency

logger = logging.getLogger(__name__)

BUNDLED_CURRENCIES_FILE = Path(__file__).resolve().parents[1] / "data" / "currencies.json"


def _field_path(loc: tuple) -> str:
    """Render a pydantic error location as [index].field.index..."""
    if not loc:
        return "<root>"
    head, *rest = loc
    parts = [f"[{head}]" if isinstance(head, int) else str(head)]
    parts.extend(str(p) for p in rest)
    return ".".join(parts)


def load_currencies(path: Optional[Path] = None) -> Tuple[Currency, ...]:
    """
    Load and validate currency definitions from a JSON file.

    Args:
        path: Currency file; the bundled definitions are used when omitted

    Returns:
        Currencies in file order

    Raises:
        CurrencyConfigNotFoundError: File is missing or unreadable
        MalformedCurrencyConfigError: File is not valid JSON or has the wrong shape
    """
    path = Path(path) if path is not None else BUNDLED_CURRENCIES_FILE

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CurrencyConfigNotFoundError(f"Unable to read currency definitions from {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise MalformedCurrencyConfigError(
            f"Malformed currency definitions in {path}: <root>: not valid UTF-8 text",
            field="<root>",
        ) from e

    try:
        parsed = CurrencyFileSchema.model_validate_json(raw)
    except ValidationError as e:
        # Report the first offending field, the rest go to the debug log
        first = e.errors()[0]
        field = _field_path(first["loc"])
        logger.debug("Currency file validation errors", extra={"path": str(path), "errors": e.error_count()})
        raise MalformedCurrencyConfigError(
            f"Malformed currency definitions in {path}: {field}: {first['msg']}",
            field=field,
        ) from e

    currencies = tuple(schema.to_domain() for schema in parsed.root)

    for currency in currencies:
        if not has_unit_coin(currency):
            logger.info(
                "Currency has no unit coin, some amounts cannot be changed exactly",
                extra={"currency": currency.abbreviation},
            )

    logger.info("Loaded currency definitions", extra={"path": str(path), "count": len(currencies)})
    return currencies
