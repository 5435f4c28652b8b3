"""Integration test fixtures: the full app over an in-memory database."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from payroll_admin.api.app import create_app
from payroll_admin.api.dependencies import get_clock
from payroll_admin.config import Settings
from tests.conftest import TEST_DATABASE_URL, FakeClock

ALICE = {
    "code": "EMP-001",
    "name": "Alice Haddad",
    "jobTitle": "Accountant",
    "basicSalary": 4500,
    "workDays": 22,
    "dailyWorkHours": 8,
    "monthlyIncentives": 250,
    "dateAdded": "2026-01-02",
}


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url=TEST_DATABASE_URL,
        host="127.0.0.1",
        port=3000,
        debug=False,
        sql_echo=False,
        log_level="DEBUG",
        cors_origins=("*",),
    )


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    clock: FakeClock,
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    app = create_app(settings=test_settings, session_factory=session_factory)
    app.dependency_overrides[get_clock] = lambda: clock
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def alice(client: AsyncClient) -> dict[str, Any]:
    """Alice as stored by POST /api/employees."""
    response = await client.post("/api/employees", json=ALICE)
    assert response.status_code == 201, response.text
    return response.json()
