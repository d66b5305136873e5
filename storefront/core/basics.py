"""Small arithmetic helpers and a canned async data source."""

import asyncio
import math
from collections.abc import Sequence

SAMPLE_DATA = (1, 2, 3)


def max_of(a: float, b: float) -> float:
    """Return the larger argument; ties return the first."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(numbers: Sequence[float]) -> float:
    """Arithmetic mean. An empty sequence has no mean, so NaN is returned."""
    if not numbers:
        return math.nan
    return sum(numbers) / len(numbers)


async def fetch_data() -> list[int]:
    """Resolve to a list of numbers after yielding to the event loop once."""
    await asyncio.sleep(0)
    return list(SAMPLE_DATA)
