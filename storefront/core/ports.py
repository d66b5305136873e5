"""Port interfaces for the Storefront system.

These abstract base classes define the boundaries between core
domain logic and external collaborators. Implementations live in the
adapters/ package; in-memory fakes for tests live in tests/fakes/.

Every port here is driven: the core calls out to it.

- ClockPort: Current wall-clock time
- ExchangeRatePort: Currency conversion rates
- ShippingQuotePort: Shipping cost and delivery estimate
- AnalyticsPort: Page view tracking
- PaymentPort: Charging a credit card
- EmailPort: Sending email to a customer
- SecurityCodePort: One-time login codes
"""

from abc import ABC, abstractmethod
from datetime import datetime

from .models import ChargeResult, CreditCard, ShippingQuote


class ClockPort(ABC):
    """Source of the current time.

    Time-dependent policies read the clock through this port so tests
    can pin the current time.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local date and time."""


class ExchangeRatePort(ABC):
    """Port for looking up currency exchange rates."""

    @abstractmethod
    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return how many units of to_currency one unit of from_currency buys.

        Args:
            from_currency: ISO 4217 code of the source currency (e.g. "USD").
            to_currency: ISO 4217 code of the target currency (e.g. "AUD").

        Raises:
            ValueError: If either currency is not supported.
        """


class ShippingQuotePort(ABC):
    """Port for requesting shipping quotes."""

    @abstractmethod
    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """Quote shipping to a destination.

        Returns:
            ShippingQuote, or None if no carrier serves the destination.
        """


class AnalyticsPort(ABC):
    """Port for recording page views."""

    @abstractmethod
    def track_page_view(self, path: str) -> None:
        """Record one view of the page at path."""


class PaymentPort(ABC):
    """Port for charging customers.

    A declined payment is reported through ChargeResult.status, not
    by raising.
    """

    @abstractmethod
    async def charge(self, credit_card: CreditCard, amount: float) -> ChargeResult:
        """Charge amount to the card.

        Raises:
            Exception: If the payment provider is unreachable.
        """


class EmailPort(ABC):
    """Port for sending email. Fire-and-forget: nothing is returned."""

    @abstractmethod
    async def send_email(self, recipient: str, subject: str) -> None:
        """Send a message to recipient."""


class SecurityCodePort(ABC):
    """Port for generating one-time security codes."""

    @abstractmethod
    def generate_code(self) -> int:
        """Return a fresh numeric code."""
