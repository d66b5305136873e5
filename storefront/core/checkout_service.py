"""Checkout service: composes validation and collaborator calls.

This is a core service that orchestrates customer-facing operations
(price conversion, shipping info, page rendering, order submission,
sign-up, login) by calling out to the collaborator ports. It keeps no
state between calls.
"""

import logging

from .models import PAYMENT_ERROR, CreditCard, Order, OrderResult
from .ports import (
    AnalyticsPort,
    EmailPort,
    ExchangeRatePort,
    PaymentPort,
    SecurityCodePort,
    ShippingQuotePort,
)
from .validation import is_valid_email

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome aboard!"
SHIPPING_UNAVAILABLE = "Shipping Unavailable"
HOME_PAGE_CONTENT = "<div>content</div>"


def format_amount(amount: float) -> str:
    """Dollar amount without trailing zeros for whole values ($10, $12.50)."""
    if float(amount).is_integer():
        return f"${int(amount)}"
    return f"${amount:.2f}"


class CheckoutService:
    """Core checkout orchestration.

    Every collaborator is injected as a port, so production adapters and
    test fakes are interchangeable.
    """

    def __init__(
        self,
        exchange_rates: ExchangeRatePort,
        shipping: ShippingQuotePort,
        analytics: AnalyticsPort,
        payment: PaymentPort,
        email: EmailPort,
        security: SecurityCodePort,
        base_currency: str = "USD",
        home_path: str = "/home",
    ):
        """Initialize the checkout service.

        Args:
            exchange_rates: ExchangeRatePort for currency conversion.
            shipping: ShippingQuotePort for shipping quotes.
            analytics: AnalyticsPort notified on each page render.
            payment: PaymentPort used to charge orders.
            email: EmailPort for welcome and login emails.
            security: SecurityCodePort for one-time login codes.
            base_currency: Currency that catalog prices are expressed in.
            home_path: Path reported to analytics when the page renders.
        """
        self.exchange_rates = exchange_rates
        self.shipping = shipping
        self.analytics = analytics
        self.payment = payment
        self.email = email
        self.security = security
        self.base_currency = base_currency
        self.home_path = home_path

    def get_price_in_currency(self, price: float, target_currency: str) -> float:
        """Convert a base-currency price into target_currency.

        Raises:
            ValueError: If the exchange rate adapter does not know a currency.
        """
        rate = self.exchange_rates.get_exchange_rate(
            self.base_currency, target_currency
        )
        return price * rate

    def get_shipping_info(self, destination: str) -> str:
        """Describe shipping to destination, e.g. "Shipping Cost: $10 (2 Days)"."""
        quote = self.shipping.get_shipping_quote(destination)
        if quote is None:
            logger.info(f"No shipping quote available for {destination}")
            return SHIPPING_UNAVAILABLE
        return (
            f"Shipping Cost: {format_amount(quote.cost)} "
            f"({quote.estimated_days} Days)"
        )

    async def render_page(self) -> str:
        """Render the home page and record the view."""
        self.analytics.track_page_view(self.home_path)
        return HOME_PAGE_CONTENT

    async def submit_order(
        self, order: Order, credit_card: CreditCard
    ) -> OrderResult:
        """Charge the customer for an order.

        A declined payment is returned as OrderResult(success=False),
        never raised.

        Raises:
            Exception: If the payment port itself fails (unreachable, etc.).
        """
        result = await self.payment.charge(credit_card, order.total_amount)

        if not result.succeeded:
            logger.warning(
                "Payment declined",
                extra={"amount": order.total_amount, "status": str(result.status)},
            )
            return OrderResult(success=False, error=PAYMENT_ERROR)

        logger.info("Payment accepted", extra={"amount": order.total_amount})
        return OrderResult(success=True)

    async def sign_up(self, email: str) -> bool:
        """Register an email address and send a welcome message.

        Returns:
            False without sending anything if the address is malformed.
        """
        if not is_valid_email(email):
            logger.info(f"Rejected sign-up for malformed address {email!r}")
            return False

        await self.email.send_email(email, WELCOME_SUBJECT)
        return True

    async def login(self, email: str) -> None:
        """Email a one-time login code to the customer."""
        code = self.security.generate_code()
        await self.email.send_email(email, str(code))
        logger.debug(f"Login code sent to {email}")
