"""System clock adapter."""

from datetime import datetime

from storefront.core.ports import ClockPort


class SystemClock(ClockPort):
    """Reads the local wall clock."""

    def now(self) -> datetime:
        return datetime.now()
