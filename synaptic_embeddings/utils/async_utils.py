"""Async utility functions."""

import asyncio
from typing import Awaitable, List, TypeVar

T = TypeVar('T')


async def gather_with_concurrency(
    tasks: List[Awaitable[T]],
    max_concurrency: int = 10,
) -> List[T]:
    """Run multiple coroutines with limited concurrency.

    Results come back in the order of ``tasks``. If any coroutine fails, the
    ones still pending are cancelled and the first error is re-raised.
    """
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _run_with_semaphore(task: Awaitable[T]) -> T:
        async with semaphore:
            return await task

    # Wrap all tasks with semaphore
    limited_tasks = [asyncio.ensure_future(_run_with_semaphore(task)) for task in tasks]

    try:
        return await asyncio.gather(*limited_tasks)
    except BaseException:
        for task in limited_tasks:
            task.cancel()
        # Let cancelled tasks settle so nothing is left dangling
        await asyncio.gather(*limited_tasks, return_exceptions=True)
        for task in tasks:
            if asyncio.iscoroutine(task):
                task.close()
        raise
