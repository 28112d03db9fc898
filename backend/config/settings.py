"""
Configuration centralisee du service Companies.

Ce fichier charge toutes les variables d'environnement et fournit
une interface unique pour acceder a la configuration.
"""

import os
from dotenv import load_dotenv

# Charger les variables d'environnement depuis .env
load_dotenv()


class Settings:
    """
    Classe de configuration centralisee.
    Toutes les variables d'environnement sont accessibles via cette classe.
    """

    # === LOGGING ===
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "debug")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # === SERVEUR HTTP ===
    HTTP_HOST: str = os.getenv("HTTP_HOST", "0.0.0.0")
    HTTP_PORT: int = int(os.getenv("HTTP_PORT", "8080"))

    # === CONFIGURATION POSTGRESQL ===
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "postgres")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "postgres")
    MIGRATIONS_PATH: str = os.getenv("MIGRATIONS_PATH", "migrations")

    # "postgres" ou "memory"
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "postgres")

    # === EVENEMENTS (ARQ + Redis) ===
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    EVENTS_TOPIC: str = os.getenv("EVENTS_TOPIC", "companies-mutations")
    EVENTS_BATCH_SIZE: int = int(os.getenv("EVENTS_BATCH_SIZE", "3"))
    EVENTS_BATCH_TIMEOUT: float = float(os.getenv("EVENTS_BATCH_TIMEOUT", "10"))
    EVENTS_STREAM_MAXLEN: int = int(os.getenv("EVENTS_STREAM_MAXLEN", "10000"))

    # === JWT ===
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "supersecretkey")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
        os.getenv("JWT_ACCESS_TOKEN_EXPIRE_MINUTES", "60")
    )

    @classmethod
    def get_postgres_uri(cls) -> str:
        """
        Construit l'URI de connexion PostgreSQL.
        Priorite a DATABASE_URL si definie.
        """
        return os.getenv(
            "DATABASE_URL",
            f"postgresql://{cls.POSTGRES_USER}:{cls.POSTGRES_PASSWORD}@"
            f"{cls.POSTGRES_HOST}:{cls.POSTGRES_PORT}/{cls.POSTGRES_DB}"
        )

    @classmethod
    def get_masked_postgres_uri(cls) -> str:
        """Retourne l'URI avec le mot de passe masque pour l'affichage."""
        uri = cls.get_postgres_uri()
        return uri.replace(cls.POSTGRES_PASSWORD, "***") if cls.POSTGRES_PASSWORD else uri


# Instance globale pour import facile
settings = Settings()
