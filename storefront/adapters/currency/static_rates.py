"""Static exchange rate adapter.

Implements ExchangeRatePort from a fixed table of rates, each expressed
as units of the currency per unit of a common reference currency.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from storefront.core.ports import ExchangeRatePort

logger = logging.getLogger(__name__)


class StaticExchangeRateAdapter(ExchangeRatePort):
    """Cross rates computed from a configured table."""

    def __init__(self, rates: Mapping[str, float]):
        """Initialize static exchange rate adapter.

        Args:
            rates: Mapping of currency code to units per reference unit,
                e.g. {"USD": 1.0, "AUD": 1.5}.

        Raises:
            ValueError: If the table is empty or holds a non-positive rate.
        """
        if not rates:
            raise ValueError("rates must not be empty")
        for currency, rate in rates.items():
            if rate <= 0:
                raise ValueError(f"Rate for {currency} must be positive, got {rate}")
        self.rates = MappingProxyType({code.upper(): rate for code, rate in rates.items()})

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return the cross rate from_currency -> to_currency.

        Raises:
            ValueError: If either currency is missing from the table.
        """
        source = self._lookup(from_currency)
        target = self._lookup(to_currency)
        rate = target / source
        logger.debug(f"Exchange rate {from_currency}->{to_currency}: {rate}")
        return rate

    def _lookup(self, currency: str) -> float:
        rate = self.rates.get(currency.upper())
        if rate is None:
            raise ValueError(f"Unsupported currency: {currency}")
        return rate
