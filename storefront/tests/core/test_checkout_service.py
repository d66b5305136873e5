"""Unit tests for CheckoutService orchestration.

Collaborators are replaced with the in-memory fakes, or with
unittest.mock doubles where a test only cares about how a port was called.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from storefront.core.checkout_service import (
    HOME_PAGE_CONTENT,
    CheckoutService,
    format_amount,
)
from storefront.core.models import (
    ChargeResult,
    ChargeStatus,
    CreditCard,
    Order,
    OrderResult,
    ShippingQuote,
)
from storefront.core.ports import EmailPort, PaymentPort
from storefront.tests.fakes import (
    FakeAnalyticsPort,
    FakeEmailPort,
    FakeExchangeRatePort,
    FakePaymentPort,
    FakeSecurityCodePort,
    FakeShippingQuotePort,
)

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def exchange_rates() -> FakeExchangeRatePort:
    return FakeExchangeRatePort()


@pytest.fixture
def shipping() -> FakeShippingQuotePort:
    return FakeShippingQuotePort()


@pytest.fixture
def analytics() -> FakeAnalyticsPort:
    return FakeAnalyticsPort()


@pytest.fixture
def payment() -> FakePaymentPort:
    return FakePaymentPort()


@pytest.fixture
def email() -> FakeEmailPort:
    return FakeEmailPort()


@pytest.fixture
def security() -> FakeSecurityCodePort:
    return FakeSecurityCodePort()


@pytest.fixture
def service(
    exchange_rates: FakeExchangeRatePort,
    shipping: FakeShippingQuotePort,
    analytics: FakeAnalyticsPort,
    payment: FakePaymentPort,
    email: FakeEmailPort,
    security: FakeSecurityCodePort,
) -> CheckoutService:
    """Create a CheckoutService wired to fakes."""
    return CheckoutService(
        exchange_rates=exchange_rates,
        shipping=shipping,
        analytics=analytics,
        payment=payment,
        email=email,
        security=security,
    )


@pytest.fixture
def credit_card() -> CreditCard:
    return CreditCard(credit_card_number="42424242")


@pytest.fixture
def order() -> Order:
    return Order(total_amount=10)


# ============================================================================
# get_price_in_currency
# ============================================================================


class TestGetPriceInCurrency:
    def test_returns_price_in_target_currency(
        self, service: CheckoutService, exchange_rates: FakeExchangeRatePort
    ) -> None:
        exchange_rates.set_rate("USD", "AUD", 1.5)

        assert service.get_price_in_currency(10, "AUD") == pytest.approx(15)

    def test_converts_from_base_currency(
        self, service: CheckoutService, exchange_rates: FakeExchangeRatePort
    ) -> None:
        service.base_currency = "EUR"

        service.get_price_in_currency(10, "GBP")

        assert exchange_rates.calls == [("EUR", "GBP")]

    def test_unknown_currency_propagates(
        self, service: CheckoutService, exchange_rates: FakeExchangeRatePort
    ) -> None:
        exchange_rates.should_fail = True

        with pytest.raises(ValueError, match="Unsupported currency"):
            service.get_price_in_currency(10, "XXX")


# ============================================================================
# get_shipping_info
# ============================================================================


class TestGetShippingInfo:
    def test_unavailable_when_no_quote(
        self, service: CheckoutService, shipping: FakeShippingQuotePort
    ) -> None:
        shipping.set_quote(None)

        result = service.get_shipping_info("London")

        assert "unavailable" in result.lower()

    def test_shipping_info_from_quote(
        self, service: CheckoutService, shipping: FakeShippingQuotePort
    ) -> None:
        shipping.set_quote(ShippingQuote(cost=10, estimated_days=2))

        result = service.get_shipping_info("London")

        assert "$10" in result
        assert "2 days" in result.lower()
        assert shipping.requested_destinations == ["London"]

    def test_fractional_cost(
        self, service: CheckoutService, shipping: FakeShippingQuotePort
    ) -> None:
        shipping.set_quote(ShippingQuote(cost=12.5, estimated_days=5))

        assert service.get_shipping_info("Paris") == "Shipping Cost: $12.50 (5 Days)"


@pytest.mark.parametrize(
    "amount, expected",
    [(10, "$10"), (10.0, "$10"), (0, "$0"), (9.99, "$9.99"), (12.5, "$12.50")],
)
def test_format_amount(amount: float, expected: str) -> None:
    assert format_amount(amount) == expected


# ============================================================================
# render_page
# ============================================================================


class TestRenderPage:
    @pytest.mark.asyncio
    async def test_returns_content(self, service: CheckoutService) -> None:
        result = await service.render_page()

        assert "content" in result.lower()
        assert result == HOME_PAGE_CONTENT

    @pytest.mark.asyncio
    async def test_calls_analytics(
        self, service: CheckoutService, analytics: FakeAnalyticsPort
    ) -> None:
        await service.render_page()

        assert analytics.page_views == ["/home"]

    @pytest.mark.asyncio
    async def test_tracks_each_render_once(
        self, service: CheckoutService, analytics: FakeAnalyticsPort
    ) -> None:
        await service.render_page()
        await service.render_page()

        assert analytics.get_view_count("/home") == 2

    @pytest.mark.asyncio
    async def test_configured_home_path(
        self, service: CheckoutService, analytics: FakeAnalyticsPort
    ) -> None:
        service.home_path = "/shop"

        await service.render_page()

        assert analytics.page_views == ["/shop"]


# ============================================================================
# submit_order
# ============================================================================


class TestSubmitOrder:
    @pytest.mark.asyncio
    async def test_charges_the_customer(
        self,
        service: CheckoutService,
        payment: FakePaymentPort,
        order: Order,
        credit_card: CreditCard,
    ) -> None:
        await service.submit_order(order, credit_card)

        assert payment.charges == [(credit_card, order.total_amount)]

    @pytest.mark.asyncio
    async def test_success_when_payment_succeeds(
        self,
        service: CheckoutService,
        payment: FakePaymentPort,
        order: Order,
        credit_card: CreditCard,
    ) -> None:
        payment.set_status(ChargeStatus.SUCCESS)

        result = await service.submit_order(order, credit_card)

        assert result == OrderResult(success=True)
        assert result.to_dict() == {"success": True}

    @pytest.mark.asyncio
    async def test_failure_when_payment_fails(
        self,
        service: CheckoutService,
        payment: FakePaymentPort,
        order: Order,
        credit_card: CreditCard,
    ) -> None:
        payment.set_status(ChargeStatus.FAILED)

        result = await service.submit_order(order, credit_card)

        assert result == OrderResult(success=False, error="payment_error")
        assert result.to_dict() == {"success": False, "error": "payment_error"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["declined", "pending", "SUCCESS", ""])
    async def test_unknown_status_is_a_failure(
        self,
        service: CheckoutService,
        payment: FakePaymentPort,
        order: Order,
        credit_card: CreditCard,
        status: str,
    ) -> None:
        payment.set_status(status)

        result = await service.submit_order(order, credit_card)

        assert result.success is False
        assert result.error == "payment_error"

    @pytest.mark.asyncio
    async def test_raw_success_string_accepted(
        self,
        service: CheckoutService,
        payment: FakePaymentPort,
        order: Order,
        credit_card: CreditCard,
    ) -> None:
        payment.set_status("success")

        result = await service.submit_order(order, credit_card)

        assert result.success is True

    @pytest.mark.asyncio
    async def test_charge_called_once_with_mock(
        self, service: CheckoutService, order: Order, credit_card: CreditCard
    ) -> None:
        payment = MagicMock(spec=PaymentPort)
        payment.charge = AsyncMock(return_value=ChargeResult(status=ChargeStatus.SUCCESS))
        service.payment = payment

        await service.submit_order(order, credit_card)

        payment.charge.assert_awaited_once_with(credit_card, order.total_amount)

    @pytest.mark.asyncio
    async def test_provider_error_propagates(
        self,
        service: CheckoutService,
        payment: FakePaymentPort,
        order: Order,
        credit_card: CreditCard,
    ) -> None:
        payment.set_should_fail(True, "gateway timeout")

        with pytest.raises(ConnectionError, match="gateway timeout"):
            await service.submit_order(order, credit_card)

        assert len(payment.charges) == 1


# ============================================================================
# sign_up
# ============================================================================


class TestSignUp:
    EMAIL = "example@gmail.com"

    @pytest.mark.asyncio
    async def test_false_for_invalid_email(
        self, service: CheckoutService, email: FakeEmailPort
    ) -> None:
        result = await service.sign_up("a")

        assert result is False
        assert email.sent == []

    @pytest.mark.asyncio
    async def test_true_for_valid_email(self, service: CheckoutService) -> None:
        result = await service.sign_up(self.EMAIL)

        assert result is True

    @pytest.mark.asyncio
    async def test_sends_welcome_email(
        self, service: CheckoutService, email: FakeEmailPort
    ) -> None:
        await service.sign_up(self.EMAIL)

        assert len(email.sent) == 1
        recipient, subject = email.sent[0]
        assert recipient == self.EMAIL
        assert "welcome" in subject.lower()

    @pytest.mark.asyncio
    async def test_send_email_awaited_once_with_mock(
        self, service: CheckoutService
    ) -> None:
        mailer = MagicMock(spec=EmailPort)
        mailer.send_email = AsyncMock()
        service.email = mailer

        await service.sign_up(self.EMAIL)

        mailer.send_email.assert_awaited_once()
        args = mailer.send_email.await_args.args
        assert args[0] == self.EMAIL
        assert "welcome" in args[1].lower()

    @pytest.mark.asyncio
    async def test_consults_email_validator_before_sending(
        self, service: CheckoutService
    ) -> None:
        with patch(
            "storefront.core.checkout_service.is_valid_email", return_value=False
        ) as validator:
            result = await service.sign_up(self.EMAIL)

        assert result is False
        validator.assert_called_once_with(self.EMAIL)


# ============================================================================
# login
# ============================================================================


class TestLogin:
    EMAIL = "example@domain.com"

    @pytest.mark.asyncio
    async def test_emails_the_one_time_code(
        self,
        service: CheckoutService,
        security: FakeSecurityCodePort,
        email: FakeEmailPort,
    ) -> None:
        await service.login(self.EMAIL)

        security_code = str(security.issued_codes[0])
        assert email.sent == [(self.EMAIL, security_code)]

    @pytest.mark.asyncio
    async def test_each_login_gets_a_fresh_code(
        self,
        service: CheckoutService,
        security: FakeSecurityCodePort,
        email: FakeEmailPort,
    ) -> None:
        await service.login(self.EMAIL)
        await service.login(self.EMAIL)

        assert email.get_emails_to(self.EMAIL) == [str(c) for c in security.issued_codes]
        assert len(set(security.issued_codes)) == 2

    @pytest.mark.asyncio
    async def test_spied_generator(
        self, service: CheckoutService, email: FakeEmailPort
    ) -> None:
        with patch.object(service.security, "generate_code", return_value=987654) as spy:
            await service.login(self.EMAIL)

        spy.assert_called_once_with()
        assert email.get_last_email() == (self.EMAIL, "987654")
