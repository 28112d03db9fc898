"""Port abstrait pour le repository des entreprises."""

from abc import ABC, abstractmethod
from typing import Optional

from backend.domain.models.company import Company, CompanyPatch


class CompanyRepositoryPort(ABC):
    """
    Interface pour l'acces aux entreprises en base.

    Implementations:
    - PostgresCompanyRepository (psycopg3 async)
    - InMemoryCompanyRepository (developpement local et tests)
    """

    @abstractmethod
    async def create(self, company: Company) -> None:
        """Sauvegarde une nouvelle entreprise."""
        ...

    @abstractmethod
    async def update(self, patch: CompanyPatch) -> int:
        """Applique un patch et retourne le nombre de lignes affectees."""
        ...

    @abstractmethod
    async def delete(self, company_id: str) -> int:
        """Supprime une entreprise et retourne le nombre de lignes affectees."""
        ...

    @abstractmethod
    async def get_by_id(self, company_id: str) -> Optional[Company]:
        """Recupere une entreprise par son ID, None si absente."""
        ...
