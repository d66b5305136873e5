"""Random one-time code adapter.

Implements SecurityCodePort with codes drawn from the secrets module.
"""

import secrets

from storefront.core.ports import SecurityCodePort


class RandomCodeGenerator(SecurityCodePort):
    """Generates fixed-length numeric codes without a leading zero."""

    def __init__(self, digits: int = 6):
        """Initialize the code generator.

        Args:
            digits: Number of digits in each code.

        Raises:
            ValueError: If digits is less than 1.
        """
        if digits < 1:
            raise ValueError(f"digits must be at least 1, got {digits}")
        self.digits = digits

    def generate_code(self) -> int:
        low = 10 ** (self.digits - 1)
        high = 10**self.digits
        return low + secrets.randbelow(high - low)
