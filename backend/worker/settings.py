"""
Configuration du worker ARQ.

Usage:
    arq backend.worker.settings.WorkerSettings
    # ou
    python main.py worker
"""

import logging

from arq.worker import func

from backend.config import settings
from backend.config.logging_setup import setup_logging
from backend.infrastructure.adapters.arq_event_publisher import (
    DELIVER_EVENTS_JOB,
    parse_redis_settings,
)
from backend.worker.tasks import deliver_events

logger = logging.getLogger(__name__)


async def startup(ctx: dict) -> None:
    """Initialise le contexte du worker au demarrage."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    ctx["events_topic"] = settings.EVENTS_TOPIC
    ctx["events_maxlen"] = settings.EVENTS_STREAM_MAXLEN
    logger.info(f"Worker ready, delivering events to '{settings.EVENTS_TOPIC}'")


async def shutdown(ctx: dict) -> None:
    """Nettoie les ressources du worker a l'arret."""
    logger.info("Worker shut down")


class WorkerSettings:
    """Configuration ARQ du worker de livraison d'evenements."""

    # Livraison au plus une fois: pas de nouvelle tentative
    functions = [func(deliver_events, name=DELIVER_EVENTS_JOB, max_tries=1)]
    on_startup = startup
    on_shutdown = shutdown
    redis_settings = parse_redis_settings(settings.REDIS_URL)
    max_jobs = 10
    job_timeout = 30
