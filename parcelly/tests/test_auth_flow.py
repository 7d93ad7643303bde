"""
Integration tests for the Authentication Flow.

Verifies token issuing and the guard in front of mutating routes.
"""

import time
from datetime import timedelta

import pytest
from jose import jwt

from parcelly.app.core.config import settings
from parcelly.app.core.dependencies import extract_bearer_token
from parcelly.app.core.jwt import create_access_token, decode_access_token


# TEST 1: Issue a token
@pytest.mark.asyncio
async def test_jwt_endpoint_signs_posted_claims(client):
    response = await client.post("/jwt", json={"email": "customer@test.com"})

    assert response.status_code == 200
    token = response.json()["token"]
    claims = jwt.decode(token, settings.access_token_secret, algorithms=[settings.algorithm])
    assert claims["email"] == "customer@test.com"


def test_token_expires_after_one_hour():
    token = create_access_token({"email": "customer@test.com"})
    claims = jwt.get_unverified_claims(token)

    assert 3590 <= claims["exp"] - int(time.time()) <= 3600
    assert claims["exp"] - claims["iat"] == 3600


def test_posted_expiry_claims_are_overwritten():
    token = create_access_token({"email": "customer@test.com", "exp": 9999999999, "iat": 0})
    claims = jwt.get_unverified_claims(token)

    assert claims["exp"] - claims["iat"] == 3600
    assert claims["iat"] > 0


# TEST 2: Decoding
def test_decode_rejects_bad_tokens():
    good = create_access_token({"email": "a@test.com"})
    expired = create_access_token({"email": "a@test.com"}, expires_delta=timedelta(seconds=-10))
    forged = jwt.encode({"email": "a@test.com"}, "some-other-secret", algorithm="HS256")

    assert decode_access_token(good)["email"] == "a@test.com"
    assert decode_access_token(expired) is None
    assert decode_access_token(forged) is None
    assert decode_access_token("garbage") is None


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"
    assert extract_bearer_token("bearer   abc") == "abc"
    assert extract_bearer_token("Bearer") is None
    assert extract_bearer_token("") is None
    assert extract_bearer_token(None) is None


# TEST 3: Guard on promotion endpoints
@pytest.mark.asyncio
async def test_admin_promotion_without_header_is_unauthorized(client, users_collection):
    """Missing Authorization leaves the role untouched."""
    user = await users_collection.insert_one({"email": "someone@test.com", "name": "Someone"})

    response = await client.patch(f"/users/admin/{user.inserted_id}")

    assert response.status_code == 401
    assert response.json()["error_code"] == "ERR_AUTH_001"
    assert response.headers["WWW-Authenticate"] == "Bearer"
    stored = await users_collection.find_one({"_id": user.inserted_id})
    assert "role" not in stored


@pytest.mark.asyncio
@pytest.mark.parametrize("header", [
    "Bearer",
    "Bearer not.a.token",
    "Bearer " + create_access_token({"email": "x@test.com"}, timedelta(seconds=-5)),
])
async def test_bad_credentials_are_unauthorized(client, users_collection, header):
    user = await users_collection.insert_one({"email": "someone@test.com"})

    response = await client.patch(
        f"/users/deliveryMan/{user.inserted_id}",
        headers={"Authorization": header}
    )

    assert response.status_code == 401
    stored = await users_collection.find_one({"_id": user.inserted_id})
    assert "role" not in stored


@pytest.mark.asyncio
async def test_valid_token_passes_guard(client, auth_headers, users_collection):
    user = await users_collection.insert_one({"email": "someone@test.com"})

    response = await client.patch(f"/users/admin/{user.inserted_id}", headers=auth_headers)

    assert response.status_code == 200
    stored = await users_collection.find_one({"_id": user.inserted_id})
    assert stored["role"] == "Admin"


# TEST 4: Reads stay open
@pytest.mark.asyncio
async def test_read_routes_do_not_need_a_token(client):
    for url in ["/parcel", "/users", "/reviews", "/users/u/delivery"]:
        response = await client.get(url)
        assert response.status_code == 200, url
        assert response.json() == []


@pytest.mark.asyncio
async def test_root_liveness(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.text == "server is running"
    assert "X-Correlation-ID" in response.headers
