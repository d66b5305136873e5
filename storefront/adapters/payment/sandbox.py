"""Sandbox payment adapter.

Implements PaymentPort without moving money. Useful for demos and
manual runs where a real provider is not available.
"""

import asyncio
import logging
from collections.abc import Iterable

from storefront.core.models import ChargeResult, ChargeStatus, CreditCard
from storefront.core.ports import PaymentPort

logger = logging.getLogger(__name__)


def _mask(card_number: str) -> str:
    """Keep only the last four digits for logging."""
    return f"****{card_number[-4:]}" if len(card_number) > 4 else "****"


class SandboxPaymentAdapter(PaymentPort):
    """Approves charges except for test cards configured to decline.

    Non-positive amounts are declined as well.
    """

    def __init__(
        self,
        declined_cards: Iterable[str] = (),
        latency_seconds: float = 0.0,
    ):
        """Initialize sandbox payment adapter.

        Args:
            declined_cards: Card numbers that are always declined.
            latency_seconds: Simulated provider round-trip time.
        """
        if latency_seconds < 0:
            raise ValueError("latency_seconds must be non-negative")
        self.declined_cards = frozenset(declined_cards)
        self.latency_seconds = latency_seconds

    async def charge(self, credit_card: CreditCard, amount: float) -> ChargeResult:
        await asyncio.sleep(self.latency_seconds)

        masked = _mask(credit_card.credit_card_number)
        if credit_card.credit_card_number in self.declined_cards or amount <= 0:
            logger.info(f"Sandbox declined {amount} on card {masked}")
            return ChargeResult(status=ChargeStatus.FAILED)

        logger.info(f"Sandbox charged {amount} to card {masked}")
        return ChargeResult(status=ChargeStatus.SUCCESS)
