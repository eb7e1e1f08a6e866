# tests/domains/test_usr.py

"""
Integration tests for the 'usr' domain (profile sync, current user, roles).
"""

import uuid
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from portkey.core.security import create_access_token
from portkey.domains.usr import models as usr_models
from portkey.domains.usr import crud as usr_crud


# =============================================================================
# 1. Profile sync
# =============================================================================
@pytest.mark.asyncio
async def test_sync_user_creates_client_profile(client: AsyncClient, db_session: AsyncSession):
    user_uuid = uuid.uuid4()
    payload = {
        "uuid": str(user_uuid),
        "email": "new.user@example.com",
        "full_name": "New User",
        "avatar_url": "https://cdn.example.com/a.png",
    }
    response = await client.post("/api/users/sync", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == str(user_uuid)
    assert body["email"] == "new.user@example.com"
    assert body["role"] == "client"

    db_user = await usr_crud.user.get(db_session, user_uuid)
    assert db_user is not None
    assert db_user.full_name == "New User"


@pytest.mark.asyncio
async def test_sync_user_updates_existing_profile_and_keeps_role(
    client: AsyncClient,
    test_broker_user: usr_models.User,
):
    payload = {
        "uuid": str(test_broker_user.id),
        "email": "renamed@example.com",
        "full_name": "Renamed Broker",
        "avatar_url": None,
    }
    response = await client.post("/api/users/sync", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "renamed@example.com"
    assert body["full_name"] == "Renamed Broker"
    assert body["avatar_url"] is None
    assert body["role"] == "broker"


@pytest.mark.asyncio
async def test_sync_user_rejects_invalid_uuid(client: AsyncClient):
    response = await client.post("/api/users/sync", json={"uuid": "not-a-uuid", "email": "x@example.com"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_by_email(db_session: AsyncSession, test_user: usr_models.User):
    found = await usr_crud.user.get_by_email(db_session, email=test_user.email)
    assert found is not None
    assert found.id == test_user.id
    assert await usr_crud.user.get_by_email(db_session, email="nobody@example.com") is None


# =============================================================================
# 2. Authentication
# =============================================================================
@pytest.mark.asyncio
async def test_read_me(authorized_client: AsyncClient, test_user: usr_models.User):
    response = await authorized_client.get("/api/users/me")
    assert response.status_code == 200
    assert response.json()["id"] == str(test_user.id)


@pytest.mark.asyncio
async def test_read_me_without_token(client: AsyncClient):
    response = await client.get("/api/users/me")
    assert response.status_code == 401
    assert response.json()["detail"] == "Could not validate credentials"


@pytest.mark.asyncio
async def test_read_me_with_invalid_tokens(client: AsyncClient, test_user: usr_models.User):
    """Expired tokens, wrong audiences and tokens for unknown profiles are all rejected."""
    tokens = [
        "garbage.token.value",
        create_access_token({"sub": str(test_user.id)}, expires_delta=timedelta(minutes=-5)),
        create_access_token({"sub": str(test_user.id), "aud": "someone-else"}),
        create_access_token({"sub": "not-a-uuid"}),
        create_access_token({"sub": str(uuid.uuid4())}),
    ]
    for token in tokens:
        response = await client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401, token


# =============================================================================
# 3. Administration
# =============================================================================
@pytest.mark.asyncio
async def test_list_users_admin_only(
    admin_client: AsyncClient,
    authorized_client: AsyncClient,
    test_user: usr_models.User,
):
    response = await admin_client.get("/api/users")
    assert response.status_code == 200
    ids = [u["id"] for u in response.json()]
    assert str(test_user.id) in ids

    response = await authorized_client.get("/api/users")
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_role(admin_client: AsyncClient, test_user: usr_models.User):
    response = await admin_client.put(f"/api/users/{test_user.id}/role", json={"role": "broker"})
    assert response.status_code == 200
    assert response.json()["role"] == "broker"


@pytest.mark.asyncio
async def test_update_role_unknown_user(admin_client: AsyncClient):
    response = await admin_client.put(f"/api/users/{uuid.uuid4()}/role", json={"role": "broker"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_admin_cannot_demote_self(admin_client: AsyncClient, test_admin_user: usr_models.User):
    response = await admin_client.put(f"/api/users/{test_admin_user.id}/role", json={"role": "client"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_role_invalid_value(admin_client: AsyncClient, test_user: usr_models.User):
    response = await admin_client.put(f"/api/users/{test_user.id}/role", json={"role": "captain"})
    assert response.status_code == 422
