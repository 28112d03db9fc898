"""Routes CRUD pour la gestion des entreprises."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from dependency_injector.wiring import inject, Provide

from backend.application.services.company_service import CompanyService
from backend.domain.exceptions import CompanyNotFoundError
from backend.domain.models.company import CompanyCreate, CompanyResponse, CompanyUpdate
from backend.infrastructure.container import Container
from backend.routes.dependencies import get_token_claims

logger = logging.getLogger(__name__)

router = APIRouter()

# Ecritures: le token est valide avant que le service ne soit appele
secured_router = APIRouter(prefix="/secured", dependencies=[Depends(get_token_claims)])

COMPANY_NOT_FOUND = "Company not found"


def parse_company_id(raw: str) -> str:
    """Normalise l'id de chemin en minuscules et verifie que c'est un UUID."""
    company_id = raw.lower()
    try:
        uuid.UUID(company_id)
    except ValueError as e:
        logger.debug(f"Invalid company id {raw!r}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return company_id


@router.get("/companies/{company_uuid}", response_model=CompanyResponse)
@inject
async def get_company(
    company_uuid: str,
    service: CompanyService = Depends(Provide[Container.company_service]),
):
    """Retourne une entreprise, 404 si elle n'existe pas."""
    company_id = parse_company_id(company_uuid)
    company = await service.get_company(company_id)
    if company is None:
        logger.debug(f"Company {company_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COMPANY_NOT_FOUND)
    return CompanyResponse.from_domain(company)


@secured_router.post("/companies", status_code=status.HTTP_201_CREATED)
@inject
async def create_company(
    payload: CompanyCreate,
    service: CompanyService = Depends(Provide[Container.company_service]),
) -> None:
    """Cree une entreprise; l'id est fourni par l'appelant."""
    await service.create_company(payload.to_domain())


@secured_router.patch("/companies/{company_uuid}")
@inject
async def update_company(
    company_uuid: str,
    payload: CompanyUpdate,
    service: CompanyService = Depends(Provide[Container.company_service]),
) -> None:
    """Applique une modification partielle: seuls les champs fournis sont ecrits."""
    company_id = parse_company_id(company_uuid)
    try:
        await service.update_company(payload.to_domain(company_id))
    except CompanyNotFoundError as e:
        logger.debug(str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COMPANY_NOT_FOUND)


@secured_router.delete("/companies/{company_uuid}")
@inject
async def delete_company(
    company_uuid: str,
    service: CompanyService = Depends(Provide[Container.company_service]),
) -> None:
    """Supprime une entreprise."""
    company_id = parse_company_id(company_uuid)
    try:
        await service.delete_company(company_id)
    except CompanyNotFoundError as e:
        logger.debug(str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COMPANY_NOT_FOUND)


router.include_router(secured_router)
