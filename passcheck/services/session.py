from __future__ import annotations

import asyncio
import logging
from typing import AbstractSet, Callable, Optional

from passcheck.core.config import Setting, get_setting
from passcheck.core.errors import BreachCheckFailed
from passcheck.models.analysis import AnalysisResult, BreachStatus
from passcheck.services.analyzer import analyze, refine_with_breach
from passcheck.services.breach.base import BreachClient

logger = logging.getLogger(__name__)

ResultCallback = Callable[[AnalysisResult], None]


class AnalysisSession:
    """
    Two-phase publisher for a stream of password edits.

    submit() publishes the local result immediately, then schedules one
    breach lookup on the running event loop. The refined result is published
    only if no newer submit() happened meanwhile (last input wins). Superseded
    lookups are not cancelled, their results are dropped.
    """

    def __init__(
        self,
        client: BreachClient,
        on_result: Optional[ResultCallback] = None,
        common_passwords: Optional[AbstractSet[str]] = None,
        timeout: Optional[float] = None,
    ):
        self.client = client
        self.common_passwords = common_passwords
        self.timeout = timeout if timeout is not None else get_setting(Setting.BREACH_TIMEOUT_SECONDS)

        self._listeners: list[ResultCallback] = []
        self._generation = 0
        self._tasks: set[asyncio.Task] = set()
        self.latest: AnalysisResult | None = None

        if on_result is not None:
            self.subscribe(on_result)

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, callback: ResultCallback) -> None:
        self._listeners.append(callback)

    def _publish(self, result: AnalysisResult) -> None:
        self.latest = result
        for callback in self._listeners:
            callback(result)

    def submit(self, password: str) -> asyncio.Task | None:
        """
        Must be called from a running event loop.
        Returns the breach-check task, or None when no lookup is needed.
        """
        self._generation += 1
        generation = self._generation

        result = analyze(password, self.common_passwords)
        self._publish(result)

        if result.breach_status != BreachStatus.PENDING:
            return None

        task = asyncio.get_running_loop().create_task(self._resolve(generation, result))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _lookup(self, digest: str) -> int | None:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.client.check_digest, digest),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("breach_check_timeout prefix=%s timeout=%s", digest[:5], self.timeout)
            return None
        except BreachCheckFailed:
            logger.warning("breach_check_failed prefix=%s", digest[:5])
            return None
        except Exception as exc:
            logger.warning("breach_check_error prefix=%s error=%s", digest[:5], type(exc).__name__)
            return None

    async def _resolve(self, generation: int, result: AnalysisResult) -> AnalysisResult | None:
        count = await self._lookup(result.digest)

        if generation != self._generation:
            logger.debug("breach_check_superseded generation=%s current=%s", generation, self._generation)
            return None

        refined = refine_with_breach(result, count)
        self._publish(refined)
        return refined

    async def drain(self) -> None:
        if self._tasks:
            await asyncio.gather(*list(self._tasks))
