"""All-or-nothing gather — concurrent reads that fail as a unit.

Invariants:
    - Results returned in argument order, whatever the completion order
    - First failure cancels the remaining reads, waits for them, then re-raises
"""

import asyncio
from typing import Awaitable, Iterable, TypeVar

T = TypeVar("T")


async def gather_or_cancel(aws: Iterable[Awaitable[T]]) -> list[T]:
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
