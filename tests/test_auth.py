"""Auth: login, bearer-token guard and explicit admin bootstrap.

Invariants:
    - Login never provisions an admin; bootstrap does
    - ensure_admin is idempotent, also when two workers race
    - The configured email logs in as written, whatever its case or domain
    - Wrong password -> 400, missing/garbled token -> 401
"""

import asyncio
from datetime import timedelta

from portfolio_api.core.auth import create_access_token, decode_access_token
from portfolio_api.crud.admin import admin_crud
from portfolio_api.services.admin_service import admin_service


async def test_login_returns_token(client, admin, admin_credentials):
    res = await client.post("/api/auth/login", json=admin_credentials)

    assert res.status_code == 200
    body = res.json()
    assert body["email"] == admin_credentials["email"]
    assert decode_access_token(body["token"]).admin_id == str(admin.id)


async def test_login_wrong_password(client, admin, admin_credentials):
    res = await client.post(
        "/api/auth/login",
        json={"email": admin_credentials["email"], "password": "wrong"},
    )

    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid credentials"


async def test_login_does_not_provision_admin(client, test_db, admin_credentials):
    res = await client.post("/api/auth/login", json=admin_credentials)

    assert res.status_code == 400
    assert len(await admin_crud.get_all(test_db)) == 0


async def test_ensure_admin_is_idempotent(test_db, admin_credentials):
    first = await admin_service.ensure_admin(test_db, **admin_credentials)
    second = await admin_service.ensure_admin(test_db, email="other@portfolio.dev", password="x")

    assert first.id == second.id
    assert second.email == admin_credentials["email"]
    assert len(await admin_crud.get_all(test_db)) == 1


async def test_ensure_admin_without_credentials_is_noop(test_db):
    assert await admin_service.ensure_admin(test_db, email="", password="") is None
    assert len(await admin_crud.get_all(test_db)) == 0


async def test_password_is_stored_hashed(admin, admin_credentials):
    assert admin.password_hash != admin_credentials["password"]


async def test_me_requires_token(client):
    assert (await client.get("/api/auth/me")).status_code == 401


async def test_me_returns_identity(client, admin, auth_headers):
    res = await client.get("/api/auth/me", headers=auth_headers)

    assert res.status_code == 200
    assert res.json() == {"id": str(admin.id), "email": admin.email}


async def test_garbled_token_rejected(client):
    res = await client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401


async def test_expired_token_rejected(client, admin):
    token = create_access_token(
        admin_id=str(admin.id), email=admin.email, expires_delta=timedelta(seconds=-5),
    )
    res = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


async def test_login_with_mixed_case_configured_email(client, test_db):
    await admin_service.ensure_admin(test_db, email="Admin@Portfolio.dev", password="pw-123")

    res = await client.post(
        "/api/auth/login", json={"email": "Admin@Portfolio.dev", "password": "pw-123"},
    )

    assert res.status_code == 200
    assert res.json()["email"] == "admin@portfolio.dev"


async def test_login_ignores_email_case(client, test_db):
    await admin_service.ensure_admin(test_db, email="admin@portfolio.dev", password="pw-123")

    res = await client.post(
        "/api/auth/login", json={"email": " ADMIN@portfolio.DEV ", "password": "pw-123"},
    )

    assert res.status_code == 200


async def test_login_with_reserved_domain_email(client, test_db):
    await admin_service.ensure_admin(test_db, email="admin@portfolio.local", password="pw-123")

    res = await client.post(
        "/api/auth/login", json={"email": "admin@portfolio.local", "password": "pw-123"},
    )

    assert res.status_code == 200
    assert res.json()["email"] == "admin@portfolio.local"


async def test_concurrent_bootstrap_creates_one_admin(test_session_factory, admin_credentials):
    async def bootstrap():
        async with test_session_factory() as db:
            return await admin_service.ensure_admin(db, **admin_credentials)

    first, second = await asyncio.gather(bootstrap(), bootstrap())

    assert first is not None and second is not None
    assert first.id == second.id
    async with test_session_factory() as db:
        assert len(await admin_crud.get_all(db)) == 1
