from __future__ import annotations

import os
from unittest.mock import AsyncMock

import pytest

os.environ.setdefault("STORAGE_BACKEND", "memory")

from backend.domain.models.company import Company, CompanyType  # noqa: E402
from backend.domain.ports.company_repository_port import CompanyRepositoryPort  # noqa: E402
from backend.domain.ports.event_publisher_port import EventPublisherPort  # noqa: E402
from backend.infrastructure.security import TokenAuthority  # noqa: E402

TEST_SECRET = "test-secret-key-with-at-least-32-bytes"
COMPANY_ID = "0d9f6a2e-4b1c-4f3e-9a57-2c8e1d7b6f10"


@pytest.fixture
def company() -> Company:
    return Company(
        id=COMPANY_ID,
        name="Acme",
        description="Anvils and rockets",
        employees_amount=17,
        registered=True,
        type=CompanyType.COOPERATIVE,
    )


@pytest.fixture
def repo():
    return AsyncMock(spec=CompanyRepositoryPort)


@pytest.fixture
def publisher():
    return AsyncMock(spec=EventPublisherPort)


@pytest.fixture
def authority() -> TokenAuthority:
    return TokenAuthority(TEST_SECRET)
