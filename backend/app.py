"""
Application FastAPI du service Companies.

Usage:
    uvicorn backend.app:create_app --factory --port 8080
    # ou
    python main.py serve
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.domain.exceptions import StorageError
from backend.infrastructure.container import Container
from backend.routes import companies

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Les erreurs de validation de requete sont des 400, pas des 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application FastAPI.

    Args:
        container: Container DI (un nouveau par defaut; les tests
            passent le leur pour surcharger les providers)
    """
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Cle de signature initialisee une fois au demarrage
        container.token_authority()
        logger.info("Companies API started")
        try:
            yield
        finally:
            await container.event_publisher().close()
            logger.info("Companies API stopped")

    app = FastAPI(title="Companies API", lifespan=lifespan)
    app.container = container

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)

    app.include_router(companies.router, prefix=API_PREFIX, tags=["companies"])

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
