"""Modele domain et schemas API pour les entreprises."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CompanyType(str, Enum):
    """Forme juridique d'une entreprise."""

    CORPORATIONS = "Corporations"
    NON_PROFIT = "NonProfit"
    COOPERATIVE = "Cooperative"
    SOLE_PROPRIETORSHIP = "Sole Proprietorship"


@dataclass
class Company:
    """
    Entite entreprise du domaine.

    L'identifiant est fourni par l'appelant a la creation (UUID en minuscules)
    et ne change jamais. created_at est pose par le stockage a l'insertion,
    updated_at reste None jusqu'au premier patch.
    """

    id: str
    name: str
    description: str
    employees_amount: int
    registered: bool
    type: CompanyType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class CompanyPatch:
    """
    Modification partielle d'une entreprise.

    None signifie "champ absent". Une valeur vide ("", 0, False) est une
    valeur presente, sauf pour name ou "" est ignore par le patch builder.
    """

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    employees_amount: Optional[int] = None
    registered: Optional[bool] = None
    type: Optional[CompanyType] = None

    def present_fields(self) -> list[str]:
        """Noms des champs optionnels fournis, dans l'ordre de declaration."""
        return [
            f.name for f in fields(self)
            if f.name != "id" and getattr(self, f.name) is not None
        ]


# --- Schemas API (Pydantic) ---

CompanyName = Annotated[str, Field(min_length=1, max_length=15)]
CompanyDescription = Annotated[str, Field(max_length=3000)]


class CompanyCreate(BaseModel):
    """Schema pour la creation d'une entreprise."""

    model_config = ConfigDict(extra="forbid")

    id: UUID
    name: CompanyName
    description: CompanyDescription = ""
    employees_amount: int
    registered: bool
    type: CompanyType

    def to_domain(self) -> Company:
        return Company(
            id=str(self.id).lower(),
            name=self.name,
            description=self.description,
            employees_amount=self.employees_amount,
            registered=self.registered,
            type=self.type,
        )


class CompanyUpdate(BaseModel):
    """Schema pour la modification partielle d'une entreprise."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[Annotated[str, Field(max_length=15)]] = None
    description: Optional[CompanyDescription] = None
    employees_amount: Optional[int] = None
    registered: Optional[bool] = None
    type: Optional[CompanyType] = None

    def to_domain(self, company_id: str) -> CompanyPatch:
        return CompanyPatch(
            id=company_id,
            name=self.name,
            description=self.description,
            employees_amount=self.employees_amount,
            registered=self.registered,
            type=self.type,
        )


class CompanyResponse(BaseModel):
    """Schema de reponse pour une entreprise."""

    id: str
    name: str
    description: str
    employees_amount: int
    registered: bool
    type: CompanyType
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_domain(cls, company: Company) -> "CompanyResponse":
        return cls(
            id=company.id,
            name=company.name,
            description=company.description,
            employees_amount=company.employees_amount,
            registered=company.registered,
            type=company.type,
            created_at=company.created_at.isoformat() if company.created_at else None,
            updated_at=company.updated_at.isoformat() if company.updated_at else None,
        )
