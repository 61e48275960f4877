"""Numeric helpers: bounds, lenient conversion and random fixed-width numbers."""

from __future__ import annotations

import math
import random
import re
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any

from .errors import InvalidArgumentError, InvalidTypeError

TWO_PLACES = Decimal("0.01")
_INTEGER_STRING = re.compile(r"[+-]?[0-9]+")


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _check_bounds(number: object, lower: object, upper: object) -> None:
    if not all(_is_number(v) for v in (number, lower, upper)):
        raise InvalidTypeError("All arguments must be numbers")
    if lower > upper:  # type: ignore[operator]
        raise InvalidArgumentError(
            "Lower bound must be less than or equal to upper bound"
        )


def clamp(number: float, lower: float, upper: float) -> float:
    """Clamp ``number`` into the inclusive range ``[lower, upper]``.

    Raises:
        InvalidTypeError: If any argument is not a real number (``bool`` included).
        InvalidArgumentError: If ``lower`` is greater than ``upper``.
    """
    _check_bounds(number, lower, upper)
    return min(max(number, lower), upper)


def in_range(number: float, lower: float, upper: float) -> bool:
    """Return True if ``lower <= number <= upper``.

    Raises:
        InvalidTypeError: If any argument is not a real number (``bool`` included).
        InvalidArgumentError: If ``lower`` is greater than ``upper``.
    """
    _check_bounds(number, lower, upper)
    return lower <= number <= upper


def _to_finite_float(data: Any) -> float:
    """Parse ``data`` as a finite float or raise ``InvalidArgumentError``."""
    if data is None:
        raise InvalidArgumentError("Invalid input: None")
    if isinstance(data, bool):
        raise InvalidArgumentError("Invalid input: not a number")
    try:
        value = float(data.strip() if isinstance(data, str) else data)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError("Invalid input: not a number") from e
    if not math.isfinite(value):
        raise InvalidArgumentError("Invalid input: not a number")
    return value


def convert_to_int(data: Any) -> int:
    """Convert a number or numeric string to ``int``, truncating toward zero.

    Examples:
        ```py
        >>> convert_to_int("123.45")
        123
        >>> convert_to_int(-7.9)
        -7
        ```

    Raises:
        InvalidArgumentError: If ``data`` is ``None`` or not numeric.
    """
    if isinstance(data, int) and not isinstance(data, bool):
        return data
    # exact for integer strings beyond float precision
    if isinstance(data, str) and _INTEGER_STRING.fullmatch(digits := data.strip()):
        return int(digits)
    return int(_to_finite_float(data))


def convert_to_two_decimal_int(data: Any) -> float:
    """Round a number or numeric string to two decimal places (half up).

    The name is kept for parity with :func:`convert_to_int`; the result is a
    ``float``.

    Raises:
        InvalidArgumentError: If ``data`` is ``None`` or not numeric.
    """
    value = _to_finite_float(data)
    return float(Decimal(repr(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def random_number_with_fixed_length(
    length: int, rng: random.Random | None = None
) -> int:
    """Return a random integer with exactly ``length`` decimal digits.

    Raises:
        InvalidArgumentError: If ``length`` is not a positive integer.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidArgumentError("Length must be a positive integer.")
    return (rng or random).randint(10 ** (length - 1), 10**length - 1)
