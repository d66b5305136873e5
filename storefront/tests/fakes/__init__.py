"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external collaborators:

- FakeClock: Settable current time
- FakeExchangeRatePort: Fixed or per-pair exchange rates
- FakeShippingQuotePort: Configurable quote (or None)
- FakeAnalyticsPort: Captured page views
- FakePaymentPort: Canned charge results, captured charges
- FakeEmailPort: Captured outgoing email
- FakeSecurityCodePort: Predictable one-time codes
"""

from .analytics import FakeAnalyticsPort
from .clock import FakeClock
from .currency import FakeExchangeRatePort
from .email import FakeEmailPort
from .payment import FakePaymentPort
from .security import FakeSecurityCodePort
from .shipping import FakeShippingQuotePort

__all__ = [
    "FakeAnalyticsPort",
    "FakeClock",
    "FakeEmailPort",
    "FakeExchangeRatePort",
    "FakePaymentPort",
    "FakeSecurityCodePort",
    "FakeShippingQuotePort",
]
