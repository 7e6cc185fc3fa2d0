"""Health probes and profile index — authenticated service endpoints.

Invariants:
    - /health/ is 200 whenever the process is up
    - /health/ready is 503 without a reachable store
    - /profile lists the exposed collections
"""

from httpx import ASGITransport, AsyncClient

from boatyard.main import create_app


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_store(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"store": "healthy"}}


async def test_readiness_without_store_returns_503(test_settings):
    app = create_app(test_settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        auth=("admin", "hunter2"),
    ) as c:
        res = await c.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "store_unavailable"


async def test_profile_lists_boats(client):
    res = await client.get("/profile")
    assert res.status_code == 200
    links = res.json()["_links"]
    assert links["self"]["href"] == "http://test/profile"
    assert links["boats"]["href"] == "http://test/boats"
