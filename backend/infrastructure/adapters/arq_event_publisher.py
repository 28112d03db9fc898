"""Adapter ARQ pour la publication des evenements de mutation."""

import asyncio
import logging
from typing import Optional
from urllib.parse import urlparse

from arq.connections import ArqRedis, RedisSettings, create_pool

from backend.domain.exceptions import PublisherClosedError
from backend.domain.ports.event_publisher_port import EventPublisherPort

logger = logging.getLogger(__name__)

DELIVER_EVENTS_JOB = "deliver_events"


def parse_redis_settings(url: str) -> RedisSettings:
    """Parse une URL Redis en RedisSettings ARQ."""
    parsed = urlparse(url)
    return RedisSettings(
        host=parsed.hostname or "localhost",
        port=parsed.port or 6379,
        password=parsed.password,
        database=int(parsed.path.lstrip("/") or "0"),
    )


class ArqEventPublisher(EventPublisherPort):
    """
    Implementation du EventPublisherPort utilisant ARQ (async Redis queue).

    Les messages sont mis en tampon puis envoyes par lots: un lot part des
    que batch_size messages sont en attente, ou batch_timeout secondes apres
    le premier message du lot. Chaque lot devient un job ARQ consomme par
    le worker (voir backend.worker.tasks.deliver_events).

    Livraison au plus une fois: un lot dont l'envoi echoue est journalise
    puis abandonne. Le pool Redis est cree paresseusement au premier envoi.
    """

    def __init__(
        self,
        redis_settings: RedisSettings,
        batch_size: int = 3,
        batch_timeout: float = 10.0,
        job_name: str = DELIVER_EVENTS_JOB,
    ):
        self._settings = redis_settings
        self._batch_size = max(batch_size, 1)
        self._batch_timeout = batch_timeout
        self._job_name = job_name
        self._pool: Optional[ArqRedis] = None
        self._buffer: list[bytes] = []
        self._timer: Optional[asyncio.Task] = None
        self._deliveries: set[asyncio.Task] = set()
        self._closed = False

    async def _get_pool(self) -> ArqRedis:
        if self._pool is None:
            self._pool = await create_pool(self._settings)
        return self._pool

    async def publish(self, *messages: bytes) -> None:
        if self._closed:
            raise PublisherClosedError("event publisher is closed")
        if not messages:
            return

        self._buffer.extend(messages)
        if len(self._buffer) >= self._batch_size:
            self._schedule_delivery(self._take_batch())
        elif self._timer is None:
            self._timer = asyncio.create_task(self._flush_after_timeout())

    def _take_batch(self) -> list[bytes]:
        batch, self._buffer = self._buffer, []
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        return batch

    def _schedule_delivery(self, batch: list[bytes]) -> None:
        task = asyncio.create_task(self._deliver(batch))
        self._deliveries.add(task)
        task.add_done_callback(self._deliveries.discard)

    async def _flush_after_timeout(self) -> None:
        await asyncio.sleep(self._batch_timeout)
        self._timer = None
        if self._buffer:
            self._schedule_delivery(self._take_batch())

    async def _deliver(self, batch: list[bytes]) -> None:
        try:
            pool = await self._get_pool()
            job = await pool.enqueue_job(self._job_name, messages=batch)
        except Exception as e:
            logger.error(f"Failed to deliver {len(batch)} event(s), batch dropped: {e}")
            return
        job_id = job.job_id if job else None
        logger.debug(f"Events batch enqueued: {len(batch)} event(s) (job_id={job_id})")

    async def flush(self) -> None:
        """Envoie immediatement les messages en attente."""
        batch = self._take_batch()
        if batch:
            await self._deliver(batch)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self.flush()
        if self._deliveries:
            await asyncio.gather(*self._deliveries, return_exceptions=True)
        if self._pool:
            await self._pool.aclose()
            self._pool = None
        logger.info("Event publisher closed")
