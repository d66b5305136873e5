"""Flat-rate shipping adapter.

Implements ShippingQuotePort with a single price and delivery estimate
for every served destination.
"""

import logging
from collections.abc import Iterable

from storefront.core.models import ShippingQuote
from storefront.core.ports import ShippingQuotePort

logger = logging.getLogger(__name__)


class FlatRateShippingAdapter(ShippingQuotePort):
    """Same quote everywhere it ships; no quote elsewhere."""

    def __init__(
        self,
        destinations: Iterable[str],
        cost: float = 10.0,
        estimated_days: int = 2,
    ):
        """Initialize flat-rate shipping adapter.

        Args:
            destinations: Destinations the carrier serves. Matching ignores case.
            cost: Price of every shipment.
            estimated_days: Delivery estimate for every shipment.
        """
        self.destinations = frozenset(d.strip().casefold() for d in destinations)
        self.quote = ShippingQuote(cost=cost, estimated_days=estimated_days)

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        if destination.strip().casefold() not in self.destinations:
            logger.debug(f"Destination not served: {destination}")
            return None
        return self.quote
