"""Repository en memoire pour les entreprises (developpement local et tests)."""

import dataclasses
import logging
from datetime import datetime, timezone
from typing import Optional

from backend.domain.exceptions import StorageError
from backend.domain.models.company import Company, CompanyPatch
from backend.domain.ports.company_repository_port import CompanyRepositoryPort
from backend.infrastructure.repositories.company_patch import (
    CompanyRecord,
    prepare_company_patch,
)

logger = logging.getLogger(__name__)


class InMemoryCompanyRepository(CompanyRepositoryPort):
    """
    Stocke les lignes dans un dict indexe par id.

    Reproduit le comportement de la table: created_at pose a l'insertion,
    cle primaire unique, patchs appliques via prepare_company_patch().
    Les donnees sont perdues a l'arret du processus.
    """

    def __init__(self):
        self._rows: dict[str, CompanyRecord] = {}

    async def create(self, company: Company) -> None:
        if company.id in self._rows:
            raise StorageError(
                f"insert company: duplicate key value violates unique constraint (id={company.id})"
            )
        record = CompanyRecord.from_domain(company)
        record.created_at = datetime.now(timezone.utc)
        record.updated_at = None
        self._rows[company.id] = record
        logger.info(f"Company '{company.name}' ({company.id}) created")

    async def update(self, patch: CompanyPatch) -> int:
        row = self._rows.get(patch.id)
        if row is None:
            return 0
        record, fields = prepare_company_patch(patch)
        self._rows[patch.id] = dataclasses.replace(
            row, **{field: getattr(record, field) for field in fields}
        )
        return 1

    async def delete(self, company_id: str) -> int:
        if self._rows.pop(company_id, None) is None:
            return 0
        logger.info(f"Company {company_id} deleted")
        return 1

    async def get_by_id(self, company_id: str) -> Optional[Company]:
        row = self._rows.get(company_id)
        return row.to_domain() if row else None
