"""Domain models for the Storefront system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Coupon:
    """A named discount entry from the coupon catalog.

    The discount is a fraction of the price, strictly between 0 and 1.
    """

    code: str
    discount: float

    def __post_init__(self) -> None:
        """Validate coupon invariants on creation."""
        if not self.code or not self.code.strip():
            raise ValueError("code must be a non-empty string")
        if not 0 < self.discount < 1:
            raise ValueError(
                f"discount must be between 0 and 1 (exclusive), got {self.discount}"
            )


@dataclass(frozen=True)
class UserInput:
    """A sign-up form submission. Validated, never persisted."""

    username: Any
    age: Any


@dataclass(frozen=True)
class ShippingQuote:
    """A shipping offer for a destination."""

    cost: float
    estimated_days: int

    def __post_init__(self) -> None:
        """Validate quote invariants on creation."""
        if self.cost < 0:
            raise ValueError(f"cost must be non-negative, got {self.cost}")
        if self.estimated_days < 0:
            raise ValueError(
                f"estimated_days must be non-negative, got {self.estimated_days}"
            )


@dataclass(frozen=True)
class Order:
    """An order ready to be paid for."""

    total_amount: float


@dataclass(frozen=True)
class CreditCard:
    """Card details supplied per call and never stored."""

    credit_card_number: str


class ChargeStatus(Enum):
    """Outcome reported by the payment provider."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ChargeResult:
    """Result of a charge attempt.

    Providers may report statuses this system does not know about, so the
    raw string is accepted as well as a ChargeStatus member.
    """

    status: ChargeStatus | str

    @property
    def succeeded(self) -> bool:
        """True only for an explicit success status."""
        status = self.status.value if isinstance(self.status, ChargeStatus) else self.status
        return status == ChargeStatus.SUCCESS.value


PAYMENT_ERROR = "payment_error"


@dataclass(frozen=True)
class OrderResult:
    """What the caller learns after submitting an order."""

    success: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form; the error key is present only on failure."""
        result: dict[str, Any] = {"success": self.success}
        if self.error is not None:
            result["error"] = self.error
        return result
