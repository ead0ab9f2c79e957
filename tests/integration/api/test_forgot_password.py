import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.app.services.reset_token import ResetTokenCodec
from auth_service.domain.base import utcnow
from auth_service.domain.entities import User
from tests.utils.auth_helpers import register

GENERIC_MESSAGE = "If a user with that email exists, a password reset link has been sent."


@pytest.mark.asyncio
async def test_forgot_password_stores_fingerprint_only(
    client: AsyncClient, db_session: AsyncSession, notifier
):
    await register(client, "a@x.com", "pw1")

    response = await client.post("/api/forgot-password", json={"email": "a@x.com"})

    assert response.status_code == 200
    assert response.json() == {"message": GENERIC_MESSAGE}

    assert len(notifier.sent) == 1
    email, reset_url = notifier.sent[0]
    assert email == "a@x.com"
    assert "/reset-password?token=" in reset_url
    secret = notifier.last_secret()

    result = await db_session.exec(select(User).where(User.email == "a@x.com"))
    user = result.one()
    assert user.reset_token_hash == ResetTokenCodec.fingerprint(secret)
    assert user.reset_token_hash != secret
    remaining = (user.reset_token_expires_at - utcnow()).total_seconds()
    assert 55 * 60 < remaining <= 60 * 60


@pytest.mark.asyncio
async def test_known_and_unknown_email_are_byte_identical(client: AsyncClient, notifier):
    await register(client, "a@x.com", "pw1")

    known = await client.post("/api/forgot-password", json={"email": "a@x.com"})
    unknown = await client.post("/api/forgot-password", json={"email": "nobody@x.com"})

    assert known.status_code == unknown.status_code == 200
    assert known.content == unknown.content
    assert len(notifier.sent) == 1


@pytest.mark.asyncio
async def test_new_request_replaces_previous_token(
    client: AsyncClient, db_session: AsyncSession, notifier
):
    await register(client, "a@x.com", "pw1")

    await client.post("/api/forgot-password", json={"email": "a@x.com"})
    first_secret = notifier.last_secret()
    await client.post("/api/forgot-password", json={"email": "a@x.com"})
    second_secret = notifier.last_secret()

    assert first_secret != second_secret

    stale = await client.post(
        "/api/reset-password", json={"token": first_secret, "newPassword": "pw2"}
    )
    assert stale.status_code == 400


@pytest.mark.asyncio
async def test_forgot_password_missing_email(client: AsyncClient):
    response = await client.post("/api/forgot-password", json={})

    assert response.status_code == 400
