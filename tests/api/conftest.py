"""API test fixtures — isolated app per test with known principals.

Invariants:
    - create_app() receives explicit Settings (no .env, no process env reliance)
    - app.state.boat_repository set directly: httpx ASGITransport does not run
      the lifespan
    - `client` authenticates as admin; `anonymous_client` sends no credentials
"""

import pytest
from httpx import ASGITransport, AsyncClient

from boatyard.config import Settings
from boatyard.main import create_app

ADMIN = ("admin", "hunter2")
SKIPPER = ("skipper", "ahoy")


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        auth_username=ADMIN[0],
        auth_password=ADMIN[1],
        auth_users={SKIPPER[0]: SKIPPER[1]},
        store_backend="memory",
    )


@pytest.fixture
def api_app(test_settings, repository):
    app = create_app(test_settings)
    app.state.boat_repository = repository
    return app


@pytest.fixture
async def client(api_app):
    async with AsyncClient(
        transport=ASGITransport(app=api_app), base_url="http://test", auth=ADMIN,
    ) as c:
        yield c


@pytest.fixture
async def anonymous_client(api_app):
    async with AsyncClient(
        transport=ASGITransport(app=api_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def titanic(client):
    """A boat created through the API."""
    res = await client.post(
        "/boats", json={"name": "Titanic", "description": "Ocean liner"},
    )
    assert res.status_code == 201
    return res.json()
