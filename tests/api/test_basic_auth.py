"""Basic auth middleware — every path requires valid credentials.

Invariants:
    - No/invalid/malformed credentials → 401 with AUTHENTICATION_REQUIRED envelope
    - 401 precedes resource lookup (unknown ids and unknown paths included)
    - No WWW-Authenticate header and no session cookie
    - Extra principals from auth_users authenticate
"""

import pytest
from httpx import BasicAuth



@pytest.mark.parametrize("method, path", [
    ("GET", "/boats"),
    ("POST", "/boats"),
    ("GET", "/boats/1"),
    ("PUT", "/boats/1"),
    ("PATCH", "/boats/1"),
    ("DELETE", "/boats/1"),
    ("GET", "/boats/999"),
    ("GET", "/profile"),
    ("GET", "/health/"),
    ("GET", "/no/such/path"),
])
async def test_missing_credentials_returns_401(anonymous_client, method, path):
    res = await anonymous_client.request(method, path)
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_401_before_body_validation(anonymous_client):
    res = await anonymous_client.post("/boats", json={"name": ""})
    assert res.status_code == 401


async def test_existing_boat_still_401_without_credentials(anonymous_client, titanic):
    res = await anonymous_client.get(f"/boats/{titanic['id']}")
    assert res.status_code == 401


async def test_wrong_password_returns_401(anonymous_client):
    res = await anonymous_client.get("/boats", auth=BasicAuth("admin", "wrong"))
    assert res.status_code == 401


async def test_unknown_user_returns_401(anonymous_client):
    res = await anonymous_client.get("/boats", auth=BasicAuth("ghost", "hunter2"))
    assert res.status_code == 401


@pytest.mark.parametrize("header", ["Bearer token", "Basic not-base64!", "Basic"])
async def test_malformed_authorization_returns_401(anonymous_client, header):
    res = await anonymous_client.get("/boats", headers={"Authorization": header})
    assert res.status_code == 401


async def test_non_ascii_authorization_returns_401(anonymous_client):
    """Latin-1 bytes in the header are rejected, not a server error."""
    res = await anonymous_client.get(
        "/boats", headers={"Authorization": "Basic été".encode("latin-1")},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_401_has_no_challenge_header(anonymous_client):
    res = await anonymous_client.get("/boats")
    assert "www-authenticate" not in res.headers


async def test_authenticated_response_sets_no_cookie(client):
    res = await client.get("/boats")
    assert res.status_code == 200
    assert "set-cookie" not in res.headers


async def test_extra_principal_authenticates(anonymous_client):
    res = await anonymous_client.get("/boats", auth=BasicAuth("skipper", "ahoy"))
    assert res.status_code == 200


async def test_each_request_authenticated_independently(anonymous_client):
    ok = await anonymous_client.get("/boats", auth=BasicAuth("admin", "hunter2"))
    assert ok.status_code == 200
    again = await anonymous_client.get("/boats")
    assert again.status_code == 401


async def test_cors_preflight_answered_without_credentials(anonymous_client):
    res = await anonymous_client.options(
        "/boats",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"
