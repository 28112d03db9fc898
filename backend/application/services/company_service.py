"""Service applicatif: cas d'usage CRUD sur les entreprises."""

import logging
from typing import Optional

from backend.domain.exceptions import CompanyNotFoundError
from backend.domain.models.company import Company, CompanyPatch
from backend.domain.models.event import (
    COMPANY_CREATED,
    COMPANY_DELETED,
    COMPANY_UPDATED,
    Event,
)
from backend.domain.ports.company_repository_port import CompanyRepositoryPort
from backend.domain.ports.event_publisher_port import EventPublisherPort

logger = logging.getLogger(__name__)


class CompanyService:
    """
    Orchestre le repository et le publisher d'evenements.

    L'ecriture en base fait foi: ses erreurs remontent telles quelles.
    La notification est indicative: ses erreurs sont journalisees puis ignorees.
    Un nombre de lignes affectees nul signifie que l'id n'existe pas.

    Le service ne porte aucun etat par requete et peut etre partage.
    """

    def __init__(self, repo: CompanyRepositoryPort, publisher: EventPublisherPort):
        self._repo = repo
        self._publisher = publisher

    async def _publish(self, event: Event) -> None:
        try:
            message = event.to_bytes()
            await self._publisher.publish(message)
        except Exception as e:
            logger.warning(f"Failed to publish '{event.message}' event: {e}")
            return
        logger.debug(f"Event published: {message.decode('utf-8')}")

    async def create_company(self, company: Company) -> None:
        logger.debug(f"Service.create_company: id={company.id}")
        await self._repo.create(company)
        await self._publish(Event(message=COMPANY_CREATED, body=company))

    async def update_company(self, patch: CompanyPatch) -> None:
        logger.debug(f"Service.update_company: id={patch.id}")
        affected = await self._repo.update(patch)
        if affected == 0:
            raise CompanyNotFoundError(patch.id)
        await self._publish(Event(message=COMPANY_UPDATED, body=patch))

    async def delete_company(self, company_id: str) -> None:
        logger.debug(f"Service.delete_company: id={company_id}")
        affected = await self._repo.delete(company_id)
        if affected == 0:
            raise CompanyNotFoundError(company_id)
        await self._publish(Event(message=COMPANY_DELETED, body=company_id))

    async def get_company(self, company_id: str) -> Optional[Company]:
        logger.debug(f"Service.get_company: id={company_id}")
        return await self._repo.get_by_id(company_id)
