"""Repository pour les entreprises dans PostgreSQL."""

import logging
from typing import Optional

import psycopg
from psycopg import sql

from backend.domain.exceptions import StorageError
from backend.domain.models.company import Company, CompanyPatch
from backend.domain.ports.company_repository_port import CompanyRepositoryPort
from backend.infrastructure.repositories.company_patch import (
    CompanyRecord,
    prepare_company_patch,
)

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    "id", "name", "description", "employees_amount",
    "registered", "type", "created_at", "updated_at",
)


class PostgresCompanyRepository(CompanyRepositoryPort):
    """
    Acces aux entreprises dans PostgreSQL.
    Utilise psycopg3 async, une connexion par operation.

    Les erreurs du driver sont enveloppees dans StorageError
    (cause chainee) et ne sont jamais rejouees ici.
    """

    def __init__(self, conninfo: str):
        self._conninfo = conninfo

    async def create(self, company: Company) -> None:
        logger.debug(
            f"Repo.create: id={company.id} name={company.name!r} "
            f"amount={company.employees_amount} registered={company.registered} "
            f"type={company.type}"
        )
        record = CompanyRecord.from_domain(company)
        try:
            async with await psycopg.AsyncConnection.connect(self._conninfo) as conn:
                async with conn.cursor() as cur:
                    await cur.execute(
                        """
                        INSERT INTO companies (
                            id, name, description,
                            employees_amount, registered, type
                        ) VALUES (%s, %s, %s, %s, %s, %s)
                        """,
                        (
                            record.id,
                            record.name,
                            record.description,
                            record.employees_amount,
                            record.registered,
                            record.type,
                        ),
                    )
                await conn.commit()
        except psycopg.Error as e:
            raise StorageError(f"insert company: {e}") from e

        logger.info(f"Company '{company.name}' ({company.id}) created")

    async def update(self, patch: CompanyPatch) -> int:
        logger.debug(f"Repo.update: id={patch.id} fields={patch.present_fields()}")
        record, fields = prepare_company_patch(patch)

        query = sql.SQL("UPDATE companies SET {assignments} WHERE id = %s").format(
            assignments=sql.SQL(", ").join(
                sql.SQL("{} = %s").format(sql.Identifier(field)) for field in fields
            )
        )
        try:
            async with await psycopg.AsyncConnection.connect(self._conninfo) as conn:
                async with conn.cursor() as cur:
                    await cur.execute(query, (*record.values(fields), record.id))
                    affected = cur.rowcount
                await conn.commit()
        except psycopg.Error as e:
            logger.error(f"Update of company {patch.id} failed: {e}")
            raise StorageError(f"update company: {e}") from e

        logger.debug(f"Company {patch.id} updated ({affected} row(s), fields={fields})")
        return affected

    async def delete(self, company_id: str) -> int:
        logger.debug(f"Repo.delete: id={company_id}")
        try:
            async with await psycopg.AsyncConnection.connect(self._conninfo) as conn:
                async with conn.cursor() as cur:
                    await cur.execute(
                        "DELETE FROM companies WHERE id = %s",
                        (company_id,),
                    )
                    affected = cur.rowcount
                await conn.commit()
        except psycopg.Error as e:
            raise StorageError(f"delete company: {e}") from e

        if affected:
            logger.info(f"Company {company_id} deleted")
        return affected

    async def get_by_id(self, company_id: str) -> Optional[Company]:
        logger.debug(f"Repo.get_by_id: id={company_id}")
        try:
            async with await psycopg.AsyncConnection.connect(self._conninfo) as conn:
                async with conn.cursor() as cur:
                    await cur.execute(
                        """
                        SELECT id, name, description, employees_amount,
                               registered, type, created_at, updated_at
                        FROM companies
                        WHERE id = %s
                        """,
                        (company_id,),
                    )
                    row = await cur.fetchone()
        except psycopg.Error as e:
            raise StorageError(f"select company: {e}") from e

        if row:
            return CompanyRecord(**dict(zip(COMPANY_COLUMNS, row))).to_domain()
        return None
