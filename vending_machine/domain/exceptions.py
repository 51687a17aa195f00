"""Domain-specific exceptions"""

from typing import Optional


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CurrencyConfigError(DomainException):
    """Currency definitions could not be loaded"""

    pass


class CurrencyConfigNotFoundError(CurrencyConfigError):
    """Currency definition file is missing or unreadable"""

    pass


class MalformedCurrencyConfigError(CurrencyConfigError):
    """Currency definition file does not have the expected shape"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class CurrencyNotFoundError(DomainException):
    """No currency definition matches the requested code"""

    def __init__(self, code: str):
        super().__init__(f"Unable to find currency definition for code {code}")
        self.code = code


class InsufficientPaymentError(DomainException):
    """Payment does not cover the item cost"""

    def __init__(self, cost: int, payment: int):
        super().__init__("Payment is less than cost!")
        self.cost = cost
        self.payment = payment


class IncompleteChangeError(DomainException):
    """The coin set cannot represent the change amount exactly"""

    def __init__(self, amount: int, remaining: int):
        super().__init__(f"Unable to make exact change for {amount}; {remaining} left over")
        self.amount = amount
        self.remaining = remaining
