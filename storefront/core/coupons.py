"""Coupon catalog and discount calculation."""

from .models import Coupon
from .validation import is_number

# Read-only, shared by every caller.
COUPON_CATALOG: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)


def get_coupons() -> list[Coupon]:
    """Return the available coupons."""
    return list(COUPON_CATALOG)


def find_coupon(code: str) -> Coupon | None:
    for coupon in COUPON_CATALOG:
        if coupon.code == code:
            return coupon
    return None


def calculate_discount(price: float, discount_code: str) -> float | str:
    """Apply a coupon code to a price.

    An unknown code leaves the price unchanged.

    Returns:
        The discounted price, or "Invalid price" / "Invalid discount code"
        when an argument has the wrong type or a negative price is given.
    """
    if not is_number(price) or price < 0:
        return "Invalid price"

    if not isinstance(discount_code, str):
        return "Invalid discount code"

    coupon = find_coupon(discount_code)
    if coupon is None:
        return price
    return price * (1 - coupon.discount)
