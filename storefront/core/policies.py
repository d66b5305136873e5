"""Time-dependent store policies.

Both policies read the current time from an injected ClockPort and
have no other inputs.
"""

from datetime import date

from .ports import ClockPort


class OpeningHoursPolicy:
    """Decides whether the store is currently taking live orders.

    The opening window is half-open: [opening_hour, closing_hour).
    """

    def __init__(
        self,
        clock: ClockPort,
        opening_hour: int = 8,
        closing_hour: int = 20,
    ):
        if not 0 <= opening_hour < closing_hour <= 24:
            raise ValueError(
                f"Invalid opening window: {opening_hour}-{closing_hour}"
            )
        self.clock = clock
        self.opening_hour = opening_hour
        self.closing_hour = closing_hour

    def is_online(self) -> bool:
        current_hour = self.clock.now().hour
        return self.opening_hour <= current_hour < self.closing_hour


class HolidayDiscountPolicy:
    """Grants a fixed discount on one calendar day each year.

    Defaults to 20% off on Christmas day.
    """

    def __init__(
        self,
        clock: ClockPort,
        month: int = 12,
        day: int = 25,
        discount: float = 0.2,
    ):
        # Leap year so February 29 is accepted
        try:
            date(2000, month, day)
        except ValueError as e:
            raise ValueError(f"Invalid holiday date {month}-{day}: {e}") from e
        if not 0 <= discount < 1:
            raise ValueError(f"discount must be in [0, 1), got {discount}")
        self.clock = clock
        self.month = month
        self.day = day
        self.discount = discount

    def is_holiday(self) -> bool:
        now = self.clock.now()
        return now.month == self.month and now.day == self.day

    def get_discount(self) -> float:
        """Return the holiday discount today, 0 on any other day."""
        if self.is_holiday():
            return self.discount
        return 0
