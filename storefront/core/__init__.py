"""Core domain logic for the Storefront system.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    ChargeResult,
    ChargeStatus,
    Coupon,
    CreditCard,
    Order,
    OrderResult,
    ShippingQuote,
    UserInput,
)
from .stack import EmptyStackError, Stack

__all__ = [
    "ChargeResult",
    "ChargeStatus",
    "Coupon",
    "CreditCard",
    "EmptyStackError",
    "Order",
    "OrderResult",
    "ShippingQuote",
    "Stack",
    "UserInput",
]
