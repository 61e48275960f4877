"""Awaitable sleep with fixed, random and until-timestamp delays.

The delay is worked out by :func:`compute_delay_ms`, a pure function that can
be tested without waiting; :func:`sleep` then awaits :func:`asyncio.sleep`
once. Exactly one mode applies, in this order of precedence:

1. ``until``: sleep until a unix timestamp (seconds); past timestamps
   resolve immediately;
2. ``random``: a uniformly random delay within one unit's ``[min, max]``;
3. fixed units: ``milliseconds``, ``seconds`` and ``minutes`` are summed.

Examples:
    ```py
    await sleep(seconds=1, milliseconds=500)
    await sleep(random=RandomDelay(seconds=DelayRange(1, 3)))
    await sleep_until(1_767_225_600)
    ```
"""

from __future__ import annotations

import asyncio
import logging
import random as _random
import time
from collections.abc import Callable
from dataclasses import dataclass, fields

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

MAX_DELAY_MS = 2_147_483_647
MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND


@dataclass(frozen=True)
class DelayRange:
    """Inclusive ``[min, max]`` bounds for a random delay, in one unit."""

    min: float
    max: float


@dataclass(frozen=True)
class RandomDelay:
    """Random delay bounds per unit; the first unit set wins."""

    milliseconds: DelayRange | None = None
    seconds: DelayRange | None = None
    minutes: DelayRange | None = None


@dataclass(frozen=True)
class SleepParams:
    """Parameters accepted by :func:`sleep`.

    Attributes:
        milliseconds: Fixed delay component.
        seconds: Fixed delay component.
        minutes: Fixed delay component.
        until: Unix timestamp, in seconds, to sleep until.
        random: Random delay bounds.
    """

    milliseconds: float | None = None
    seconds: float | None = None
    minutes: float | None = None
    until: float | None = None
    random: RandomDelay | None = None

    def is_empty(self) -> bool:
        """Return True if no field is set."""
        return all(getattr(self, f.name) is None for f in fields(self))


def _random_delay_ms(delay: RandomDelay, rng: _random.Random | None) -> float:
    for unit, factor in (
        ("milliseconds", 1),
        ("seconds", MS_PER_SECOND),
        ("minutes", MS_PER_MINUTE),
    ):
        bounds: DelayRange | None = getattr(delay, unit)
        if bounds is None:
            continue
        if bounds.min < 0 or bounds.max < 0 or bounds.min > bounds.max:
            raise InvalidArgumentError(f"Invalid random {unit} range")
        return (rng or _random).uniform(bounds.min, bounds.max) * factor
    raise InvalidArgumentError(
        "Random delay type must be specified (milliseconds, seconds, or minutes)"
    )


def _fixed_delay_ms(params: SleepParams) -> float:
    units = (
        ("milliseconds", params.milliseconds, 1),
        ("seconds", params.seconds, MS_PER_SECOND),
        ("minutes", params.minutes, MS_PER_MINUTE),
    )
    if all(value is None for _, value, _ in units):
        raise InvalidArgumentError("At least one delay parameter must be specified")
    delay_ms = 0.0
    for unit, value, factor in units:
        if value is None:
            continue
        if value < 0:
            raise InvalidArgumentError(f"{unit.capitalize()} cannot be negative")
        delay_ms += value * factor
    return delay_ms


def compute_delay_ms(
    params: SleepParams,
    *,
    rng: _random.Random | None = None,
    now: Callable[[], float] = time.time,
) -> float:
    """Work out how many milliseconds :func:`sleep` should wait.

    Args:
        params: The requested delay.
        rng: Random source for ``random`` delays.
        now: Clock returning the current unix time in seconds.

    Returns:
        float: The delay in milliseconds (``0`` means do not wait).

    Raises:
        InvalidArgumentError: If ``params`` is empty, holds a negative unit or
            an invalid random range, or the delay exceeds ``MAX_DELAY_MS``.
    """
    if params.is_empty():
        raise InvalidArgumentError("Sleep parameters cannot be empty")

    if params.until is not None:
        delay_ms = max(0.0, (params.until - now()) * MS_PER_SECOND)
    elif params.random is not None:
        delay_ms = _random_delay_ms(params.random, rng)
    else:
        delay_ms = _fixed_delay_ms(params)

    if delay_ms > MAX_DELAY_MS:
        raise InvalidArgumentError(
            f"Delay too large. Maximum delay is {MAX_DELAY_MS}ms"
        )
    return delay_ms


async def sleep(
    params: SleepParams | None = None,
    *,
    rng: _random.Random | None = None,
    **units: float | RandomDelay | None,
) -> None:
    """Suspend the current task for the delay described by ``params``.

    Keyword arguments build a :class:`SleepParams` when ``params`` is omitted,
    so ``await sleep(seconds=2)`` and ``await sleep(SleepParams(seconds=2))``
    are equivalent.

    Raises:
        InvalidArgumentError: See :func:`compute_delay_ms`.
        TypeError: If both ``params`` and keyword units are given, or an
            unknown keyword is passed.
    """
    if params is not None and units:
        raise TypeError("Pass either SleepParams or keyword units, not both")
    params = params if params is not None else SleepParams(**units)  # type: ignore[arg-type]

    delay_ms = compute_delay_ms(params, rng=rng)
    if delay_ms == 0:
        return
    logger.debug("Sleeping for %.0f ms", delay_ms)
    await asyncio.sleep(int(delay_ms) / MS_PER_SECOND)


async def sleep_ms(milliseconds: float) -> None:
    """Sleep for ``milliseconds``."""
    await sleep(SleepParams(milliseconds=milliseconds))


async def sleep_seconds(seconds: float) -> None:
    """Sleep for ``seconds``."""
    await sleep(SleepParams(seconds=seconds))


async def sleep_minutes(minutes: float) -> None:
    """Sleep for ``minutes``."""
    await sleep(SleepParams(minutes=minutes))


async def sleep_until(unix_timestamp: float) -> None:
    """Sleep until ``unix_timestamp`` (seconds); return at once if it has passed."""
    await sleep(SleepParams(until=unix_timestamp))
