"""Input validation rules.

Validators report problems as return values rather than exceptions, so
callers can branch on the result without a try block:

- is_price_in_range / is_valid_username / is_valid_email: plain booleans
- validate_user_input / can_drive: a message naming the failing field
"""

import math
import re
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Any

from .models import UserInput

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15

# Minimum legal driving age per country code
LEGAL_DRIVING_AGES = MappingProxyType({"US": 16, "UK": 17})

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_number(value: Any) -> bool:
    """True for finite real numbers a float can hold. Booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    """Inclusive at both ends."""
    return min_price <= price <= max_price


def is_valid_username(
    username: Any,
    min_length: int = USERNAME_MIN_LENGTH,
    max_length: int = USERNAME_MAX_LENGTH,
) -> bool:
    """Check a display name against length bounds (inclusive)."""
    if not isinstance(username, str):
        return False
    return min_length <= len(username) <= max_length


@dataclass(frozen=True)
class ProfileRules:
    """Bounds applied by validate_user_input.

    These differ from the display-name bounds used by is_valid_username
    and are kept separate on purpose.
    """

    username_min_length: int = 3
    username_max_length: int = 255
    min_age: int = 18
    max_age: int = 100


DEFAULT_PROFILE_RULES = ProfileRules()


def validate_user_input(
    username: Any, age: Any, rules: ProfileRules = DEFAULT_PROFILE_RULES
) -> str:
    """Validate a sign-up form.

    Every check runs, so the returned message lists all failing fields.

    Returns:
        "Validation successful", or the failures joined by ", "
        (e.g. "Invalid username, Invalid age").
    """
    errors: list[str] = []

    if (
        not isinstance(username, str)
        or len(username) < rules.username_min_length
        or len(username) > rules.username_max_length
    ):
        errors.append("Invalid username")

    if not is_number(age) or age < rules.min_age or age > rules.max_age:
        errors.append("Invalid age")

    if errors:
        return ", ".join(errors)
    return "Validation successful"


def can_drive(age: float, country_code: str) -> bool | str:
    """Is a person of this age allowed to drive in the given country?

    Returns:
        True/False, or "Invalid country code" for unknown countries.
    """
    if not isinstance(country_code, str):
        return "Invalid country code"

    legal_age = LEGAL_DRIVING_AGES.get(country_code)
    if legal_age is None:
        return "Invalid country code"
    return age >= legal_age


def is_valid_email(email: Any) -> bool:
    """Loose address check: something@domain.tld with no whitespace."""
    if not isinstance(email, str):
        return False
    return _EMAIL_PATTERN.match(email) is not None


def validate_user(user: UserInput, rules: ProfileRules = DEFAULT_PROFILE_RULES) -> str:
    """validate_user_input for a UserInput record."""
    return validate_user_input(user.username, user.age, rules)
