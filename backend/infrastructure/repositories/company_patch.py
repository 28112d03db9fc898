"""
Construction des patchs d'entreprise pour le stockage.

Transforme un CompanyPatch creux en un enregistrement ne contenant que
les champs fournis, accompagne de la liste ordonnee des colonnes a ecrire.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from backend.domain.models.company import Company, CompanyPatch, CompanyType

# Ordre des colonnes optionnelles; les requetes UPDATE sont construites
# positionnellement a partir de cet ordre.
PATCHABLE_COLUMNS = ("name", "description", "employees_amount", "registered", "type")


@dataclass
class CompanyRecord:
    """Ligne de la table companies."""

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    employees_amount: Optional[int] = None
    registered: Optional[bool] = None
    type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, company: Company) -> "CompanyRecord":
        return cls(
            id=company.id,
            name=company.name,
            description=company.description,
            employees_amount=company.employees_amount,
            registered=company.registered,
            type=CompanyType(company.type).value,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )

    def to_domain(self) -> Company:
        return Company(
            id=self.id,
            name=self.name,
            description=self.description,
            employees_amount=self.employees_amount,
            registered=self.registered,
            type=CompanyType(self.type),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def values(self, columns: list[str]) -> list:
        """Valeurs des colonnes demandees, dans le meme ordre."""
        return [getattr(self, column) for column in columns]


def prepare_company_patch(
    patch: CompanyPatch, now: Optional[datetime] = None
) -> tuple[CompanyRecord, list[str]]:
    """
    Prepare un patch pour le stockage.

    Args:
        patch: Modification partielle
        now: Horodatage de mise a jour (defaut: maintenant, UTC)

    Returns:
        (record, fields) ou fields commence toujours par "updated_at",
        suivi des colonnes fournies dans l'ordre de PATCHABLE_COLUMNS.
        Un name vide est ignore.
    """
    record = CompanyRecord(id=patch.id, updated_at=now or datetime.now(timezone.utc))
    fields = ["updated_at"]

    if patch.name is not None and patch.name != "":
        record.name = patch.name
        fields.append("name")
    if patch.description is not None:
        record.description = patch.description
        fields.append("description")
    if patch.employees_amount is not None:
        record.employees_amount = patch.employees_amount
        fields.append("employees_amount")
    if patch.registered is not None:
        record.registered = patch.registered
        fields.append("registered")
    if patch.type is not None:
        record.type = CompanyType(patch.type).value
        fields.append("type")

    return record, fields
