"""Configuration du logging applicatif."""

import logging

# Bibliotheques trop bavardes en DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "arq.jobs", "psycopg")


def parse_level(level: str) -> int:
    """Convertit un nom de niveau ("debug", "WARN", ...) en niveau logging, INFO par defaut."""
    value = logging.getLevelName((level or "").strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "info", fmt: str | None = None) -> None:
    """Configure le logging racine pour le processus (API ou worker)."""
    logging.basicConfig(
        level=parse_level(level),
        format=fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
