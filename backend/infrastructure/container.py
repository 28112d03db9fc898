"""
Container DI declaratif avec dependency-injector.

Ce module utilise la librairie dependency-injector pour:
- Providers declaratifs (Singleton, Factory, Selector)
- Override pour tests sans modifier le code
- Wiring automatique avec @inject dans les routes

Documentation: https://python-dependency-injector.ets-labs.org/
"""

from datetime import timedelta

from dependency_injector import containers, providers

from backend.application.services.company_service import CompanyService
from backend.config import settings
from backend.infrastructure.adapters.arq_event_publisher import (
    ArqEventPublisher,
    parse_redis_settings,
)
from backend.infrastructure.repositories.company_repository import PostgresCompanyRepository
from backend.infrastructure.repositories.in_memory_company_repository import (
    InMemoryCompanyRepository,
)
from backend.infrastructure.security import TokenAuthority


class Container(containers.DeclarativeContainer):
    """
    Container DI de l'API.

    Usage Production:
        container = Container()
        service = container.company_service()

    Usage Tests (override sans modifier le code):
        with container.event_publisher.override(mock_publisher):
            service = container.company_service()
    """

    wiring_config = containers.WiringConfiguration(
        modules=[
            "backend.routes.companies",
            "backend.routes.dependencies",
        ]
    )

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    config = providers.Configuration(
        default={"storage_backend": settings.STORAGE_BACKEND},
    )

    # =========================================================================
    # SECURITE
    # =========================================================================

    token_authority = providers.Singleton(
        TokenAuthority,
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        ttl=timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    """Une seule autorite (et donc une seule cle) par processus."""

    # =========================================================================
    # REPOSITORIES
    # =========================================================================

    postgres_company_repository = providers.Singleton(
        PostgresCompanyRepository,
        conninfo=settings.get_postgres_uri(),
    )

    in_memory_company_repository = providers.Singleton(InMemoryCompanyRepository)

    company_repository = providers.Selector(
        config.storage_backend,
        postgres=postgres_company_repository,
        memory=in_memory_company_repository,
    )
    """Selectionne selon settings.STORAGE_BACKEND ("postgres" ou "memory")."""

    # =========================================================================
    # EVENEMENTS
    # =========================================================================

    event_publisher = providers.Singleton(
        ArqEventPublisher,
        redis_settings=parse_redis_settings(settings.REDIS_URL),
        batch_size=settings.EVENTS_BATCH_SIZE,
        batch_timeout=settings.EVENTS_BATCH_TIMEOUT,
    )

    # =========================================================================
    # SERVICES
    # =========================================================================

    company_service = providers.Factory(
        CompanyService,
        repo=company_repository,
        publisher=event_publisher,
    )
    """
    Graphe de dependances:
        company_service
            ├── company_repository (postgres | memory)
            └── event_publisher
    """
