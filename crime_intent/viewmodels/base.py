"""Task bookkeeping shared by the view-models."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine, Set

logger = logging.getLogger(__name__)


class ViewModel:
    """Base class that launches repository writes as tracked tasks.

    Writes are fire-and-forget from the UI's point of view; failures are
    logged and remain on the returned task for callers that await it.
    """

    def __init__(self):
        self._pending: Set[asyncio.Task] = set()

    def _launch(self, coro: Coroutine[Any, Any, Any], description: str) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(lambda t, desc=description: self._on_task_complete(desc, t))
        return task

    def _on_task_complete(self, description: str, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            logger.info("%s cancelled", description)
            return
        error = task.exception()
        if error is not None:
            logger.error("%s failed: %s", description, error)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def wait_idle(self) -> None:
        """Wait until every write launched so far has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
