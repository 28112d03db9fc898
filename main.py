#!/usr/bin/env python3
"""
Companies API - Point d'entree principal

Ce script fournit une interface CLI unifiee pour lancer les differents
composants du service.

Usage:
    python main.py serve [--host HOST] [--port PORT]  Lance l'API HTTP
    python main.py worker                            Lance le worker d'evenements
    python main.py setup-db                          Applique les migrations PostgreSQL
    python main.py issue-token --email E --username U  Emet un token JWT
"""

import argparse
import logging
import sys

from backend.config import settings
from backend.config.logging_setup import setup_logging

setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
logger = logging.getLogger(__name__)


def print_error(message: str):
    """Affiche un message d'erreur formate."""
    print(f"\n[ERREUR] {message}", file=sys.stderr)


def run_serve(host: str, port: int):
    """Lance l'API HTTP avec uvicorn."""
    try:
        import uvicorn

        logger.info(f"Run HTTP server on {host}:{port}")
        uvicorn.run(
            "backend.app:create_app",
            factory=True,
            host=host,
            port=port,
            log_level=settings.LOG_LEVEL.lower(),
        )
    except ImportError as e:
        print_error(f"Erreur d'import: {e}\nVerifiez que toutes les dependances sont installees: pip install -e .")
        sys.exit(1)


def run_worker():
    """Lance le worker ARQ de livraison des evenements."""
    try:
        from arq.worker import run_worker as arq_run_worker
        from backend.worker.settings import WorkerSettings

        arq_run_worker(WorkerSettings)
    except ImportError as e:
        print_error(f"Erreur d'import: {e}\nVerifiez que toutes les dependances sont installees: pip install -e .")
        sys.exit(1)


def run_setup_db():
    """Applique les migrations PostgreSQL."""
    from backend.infrastructure.db_setup import setup_postgres

    success = setup_postgres()
    sys.exit(0 if success else 1)


def run_issue_token(email: str, username: str):
    """Emet un token signe avec la cle configuree."""
    from datetime import timedelta
    from backend.infrastructure.security import TokenAuthority

    authority = TokenAuthority(
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        ttl=timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    print(authority.issue(email, username))


def main():
    parser = argparse.ArgumentParser(
        description="Companies API - CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemples:
  python main.py setup-db                  # Creer la table companies
  python main.py serve --port 8080         # Lancer l'API
  python main.py worker                    # Lancer le worker (Redis requis)
  python main.py issue-token --email a@b.com --username alice
        """
    )

    parser.add_argument(
        "command",
        choices=["serve", "worker", "setup-db", "issue-token"],
        help="Commande a executer"
    )
    parser.add_argument("--host", default=None, help="Adresse d'ecoute (pour serve)")
    parser.add_argument("--port", type=int, default=None, help="Port HTTP (pour serve)")
    parser.add_argument("--email", default="", help="Email du porteur (pour issue-token)")
    parser.add_argument("--username", default="", help="Nom du porteur (pour issue-token)")

    # Gerer le cas ou aucun argument n'est fourni
    if len(sys.argv) == 1:
        parser.print_help()
        sys.exit(0)

    args = parser.parse_args()

    if args.command == "serve":
        run_serve(args.host or settings.HTTP_HOST, args.port or settings.HTTP_PORT)

    elif args.command == "worker":
        run_worker()

    elif args.command == "setup-db":
        run_setup_db()

    elif args.command == "issue-token":
        run_issue_token(args.email, args.username)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nArret demande par l'utilisateur.")
        sys.exit(0)
    except Exception as e:
        print_error(f"Erreur fatale: {e}")
        sys.exit(1)
