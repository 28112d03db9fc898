"""Fonctions de taches ARQ pour le worker."""

import logging

logger = logging.getLogger(__name__)


async def deliver_events(ctx: dict, messages: list[bytes]) -> int:
    """
    Tache ARQ: livre un lot d'evenements de mutation.

    Chaque message est ajoute au stream Redis du topic configure
    au demarrage (ctx["events_topic"]), dans l'ordre du lot.

    Returns:
        Nombre de messages livres
    """
    redis = ctx["redis"]
    topic = ctx["events_topic"]
    for message in messages:
        await redis.xadd(
            topic,
            {"body": message},
            maxlen=ctx.get("events_maxlen"),
            approximate=True,
        )
    logger.info(f"Delivered {len(messages)} event(s) to '{topic}'")
    return len(messages)
