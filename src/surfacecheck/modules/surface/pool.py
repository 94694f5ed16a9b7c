"""Bounded, order-preserving fan-out for probe coroutines."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def run_ordered(
    items: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    concurrency: int = 1,
) -> list[R]:
    """Run ``worker`` over ``items`` and return results in input order.

    With ``concurrency <= 1`` items are processed strictly one after another.
    """
    if concurrency <= 1:
        return [await worker(item) for item in items]

    semaphore = asyncio.Semaphore(concurrency)

    async def bounded(item: T) -> R:
        async with semaphore:
            return await worker(item)

    return list(await asyncio.gather(*(bounded(item) for item in items)))
