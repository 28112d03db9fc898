"""
Initialisation du schema PostgreSQL du service Companies.

Ce module fournit des fonctions pour:
1. Tester la connexion a PostgreSQL
2. Appliquer les migrations SQL (migrations/*.sql) non encore appliquees
3. Verifier que tout est pret pour l'API
"""

import logging
from pathlib import Path

import psycopg

from backend.config import settings

logger = logging.getLogger(__name__)

MIGRATIONS_TABLE = "schema_migrations"


def list_migrations(path: str | Path) -> list[Path]:
    """Fichiers de migration tries par nom (0001_..., 0002_...)."""
    return sorted(Path(path).glob("*.sql"))


def check_connection(uri: str) -> bool:
    """
    Teste la connexion a PostgreSQL.

    Returns:
        bool: True si la connexion est reussie, False sinon
    """
    try:
        with psycopg.connect(uri) as conn:
            conn.execute("SELECT 1")
        return True
    except psycopg.Error:
        return False


def apply_migrations(uri: str, path: str | Path) -> list[str]:
    """
    Applique les migrations manquantes, chacune dans sa transaction.

    Returns:
        Noms des migrations appliquees lors de cet appel
    """
    applied: list[str] = []
    with psycopg.connect(uri, autocommit=True) as conn:
        conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {MIGRATIONS_TABLE} (
                version VARCHAR(255) PRIMARY KEY,
                applied_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
            )
            """
        )

        done = {row[0] for row in conn.execute(f"SELECT version FROM {MIGRATIONS_TABLE}")}
        for migration in list_migrations(path):
            if migration.name in done:
                continue
            with conn.transaction():
                conn.execute(migration.read_text(encoding="utf-8"))
                conn.execute(
                    f"INSERT INTO {MIGRATIONS_TABLE} (version) VALUES (%s)",
                    (migration.name,),
                )
            applied.append(migration.name)
            logger.info(f"Migration applied: {migration.name}")

        row = conn.execute(f"SELECT MAX(version) FROM {MIGRATIONS_TABLE}").fetchone()
    logger.info(f"Migrations up to date (version={row[0] if row else None})")
    return applied


def setup_postgres() -> bool:
    """
    Initialise PostgreSQL pour le service.

    Returns:
        bool: True si l'initialisation est reussie, False sinon
    """
    print("=" * 70)
    print("INITIALISATION POSTGRESQL")
    print("=" * 70)
    print(f"Connection: {settings.get_masked_postgres_uri()}")
    print(f"Migrations: {settings.MIGRATIONS_PATH}")
    print()

    if not check_connection(settings.get_postgres_uri()):
        print("ERREUR: connexion a PostgreSQL impossible.")
        return False

    try:
        applied = apply_migrations(settings.get_postgres_uri(), settings.MIGRATIONS_PATH)
    except (psycopg.Error, OSError) as e:
        print(f"\nERREUR DE MIGRATION: {e}\n")
        print("Verifiez que:")
        print("1. PostgreSQL est installe et demarre")
        print(f"2. La base de donnees '{settings.POSTGRES_DB}' existe")
        print("3. Les credentials dans .env sont corrects")
        print()
        return False

    if applied:
        print("Migrations appliquees:")
        for name in applied:
            print(f"  - {name}")
    else:
        print("Aucune migration a appliquer.")
    print("\nPOSTGRESQL EST PRET!")
    return True
