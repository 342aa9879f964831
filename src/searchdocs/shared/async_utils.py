"""
Async Utilities for concurrent source calls.

Python 3.12+ features used:
- asyncio.TaskGroup for structured concurrency (3.11+)
- Type parameter syntax for generic functions

Provides:
- Settle-all join that never raises for individual failures
- Ordered fallback between alternative retrieval strategies
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Parallel Execution with TaskGroup (Python 3.11+)
# =============================================================================

async def gather_settled(*coros: Awaitable[T]) -> list[T | Exception]:
    """
    Run coroutines concurrently and wait for all of them regardless of failure.

    Equivalent to ``Promise.allSettled``: each slot holds either the result or
    the exception raised by the coroutine at the same position. Cancellation
    of the caller still propagates.

    Example:
        outcomes = await gather_settled(fetch_a(), fetch_b())
        for outcome in outcomes:
            if isinstance(outcome, Exception):
                ...
    """
    outcomes: list[T | Exception | None] = [None] * len(coros)

    async def settle(coro: Awaitable[T], index: int) -> None:
        try:
            outcomes[index] = await coro
        except Exception as e:
            outcomes[index] = e

    async with asyncio.TaskGroup() as tg:
        for i, coro in enumerate(coros):
            tg.create_task(settle(coro, i))

    return outcomes  # type: ignore[return-value]


async def first_successful(
    strategies: Sequence[Callable[[], Awaitable[T]]],
    *,
    label: str = "request",
) -> T:
    """
    Try alternative strategies in order and return the first success.

    A strategy is only started after the previous one has raised. The last
    error is re-raised if every strategy fails.

    Args:
        strategies: Zero-argument callables returning awaitables
        label: Name used in log messages
    """
    last_error: Exception | None = None
    for index, strategy in enumerate(strategies):
        try:
            return await strategy()
        except Exception as e:
            last_error = e
            if index < len(strategies) - 1:
                logger.info(f"{label}: strategy {index + 1} failed ({e}), trying fallback")

    if last_error:
        raise last_error
    raise RuntimeError(f"{label}: no strategies given")
