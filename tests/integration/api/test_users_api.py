"""Integration tests for the users API."""

from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs, urlparse

import pytest
from sqlalchemy import select

from studyfi.infrastructure.auth.password_hasher import verify_password
from studyfi.infrastructure.persistence.models import AccountModel

USERS = "/api/v1/users"
PASSWORD = "Passw0rd!"


def account_payload(**overrides) -> dict:
    payload = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": PASSWORD,
        "country": "UK",
        "about_me": "Analyst",
    }
    payload.update(overrides)
    return payload


async def register(client, **overrides) -> dict:
    response = await client.post(f"{USERS}/register", json=account_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


def token_from_email(mock_email_service) -> str:
    link = mock_email_service.send_password_reset_email.call_args.kwargs["reset_link"]
    return parse_qs(urlparse(link).query)["token"][0]


@pytest.mark.asyncio
async def test_register_returns_account_without_secrets(client):
    body = await register(client)

    assert body["id"]
    assert body["name"] == "Ada Lovelace"
    assert body["email"] == "ada@example.com"
    assert body["country"] == "UK"
    assert body["groups"] == []
    assert "password" not in body
    assert "password_hash" not in body
    assert "reset_token" not in body


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "password,code",
    [
        ("", "password_empty"),
        ("Ab1!", "password_too_short"),
        ("Password!", "password_no_digit"),
        ("passw0rd!", "password_no_uppercase"),
        ("Passw0rd1", "password_no_special"),
    ],
)
async def test_register_rejects_weak_password(client, password, code):
    response = await client.post(f"{USERS}/register", json=account_payload(password=password))

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation error"
    assert body["details"][0]["field"] == "password"
    assert body["details"][0]["code"] == code

    listing = await client.get(USERS)
    assert listing.json() == []


@pytest.mark.asyncio
async def test_register_rejects_malformed_email(client):
    response = await client.post(f"{USERS}/register", json=account_payload(email="not-an-email"))
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_and_list_accounts(client):
    created = await register(client)

    response = await client.get(f"{USERS}/{created['id']}")
    assert response.status_code == 200
    assert response.json()["email"] == "ada@example.com"

    listing = await client.get(USERS)
    assert [a["id"] for a in listing.json()] == [created["id"]]


@pytest.mark.asyncio
async def test_get_unknown_account(client):
    response = await client.get(f"{USERS}/does-not-exist")

    assert response.status_code == 404
    assert response.json()["error"] == "Not found"


@pytest.mark.asyncio
async def test_update_profile(client, db_session):
    created = await register(client)

    response = await client.put(
        f"{USERS}/{created['id']}/profile",
        json=account_payload(name="Ada King", country=None, password="N3wPassword!"),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Ada King"
    assert body["country"] is None

    result = await db_session.execute(select(AccountModel).where(AccountModel.id == created["id"]))
    account = result.scalar_one()
    assert verify_password("N3wPassword!", account.password_hash)


@pytest.mark.asyncio
async def test_update_profile_weak_password(client):
    created = await register(client)

    response = await client.put(
        f"{USERS}/{created['id']}/profile", json=account_payload(name="Changed", password="weak")
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["code"] == "password_too_short"
    unchanged = await client.get(f"{USERS}/{created['id']}")
    assert unchanged.json()["name"] == "Ada Lovelace"


@pytest.mark.asyncio
async def test_update_profile_unknown_account(client):
    response = await client.put(f"{USERS}/missing/profile", json=account_payload())
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_password_reset_full_flow(client, db_session, mock_email_service):
    created = await register(client)

    forgot = await client.post(f"{USERS}/forgot-password", json={"email": "ada@example.com"})
    assert forgot.status_code == 200
    assert forgot.json()["message"] == "Password reset link sent to ada@example.com"

    mock_email_service.send_password_reset_email.assert_called_once()
    link = mock_email_service.send_password_reset_email.call_args.kwargs["reset_link"]
    assert link.startswith("http://localhost:3000/reset-password?token=")
    raw_token = token_from_email(mock_email_service)

    verify = await client.get(f"{USERS}/verify-reset-token/{raw_token}")
    assert verify.status_code == 200
    assert verify.json()["valid"] is True
    assert verify.json()["expires_at"] is not None

    reset = await client.post(
        f"{USERS}/reset-password", json={"token": raw_token, "new_password": "Brand-N3w!"}
    )
    assert reset.status_code == 200
    assert reset.json()["message"] == "Password has been successfully reset."

    result = await db_session.execute(select(AccountModel).where(AccountModel.id == created["id"]))
    account = result.scalar_one()
    assert verify_password("Brand-N3w!", account.password_hash)
    assert account.reset_token is None
    assert account.reset_token_expiry is None

    reuse = await client.post(
        f"{USERS}/reset-password", json={"token": raw_token, "new_password": "An0ther!!"}
    )
    assert reuse.status_code == 400
    assert reuse.json()["code"] == "invalid_token"

    verify_again = await client.get(f"{USERS}/verify-reset-token/{raw_token}")
    assert verify_again.json() == {"valid": False, "expires_at": None}


@pytest.mark.asyncio
async def test_forgot_password_unknown_email(client, mock_email_service):
    response = await client.post(f"{USERS}/forgot-password", json={"email": "ghost@example.com"})

    assert response.status_code == 404
    mock_email_service.send_password_reset_email.assert_not_called()


@pytest.mark.asyncio
async def test_forgot_password_succeeds_when_email_fails(client, mock_email_service):
    await register(client)
    mock_email_service.send_password_reset_email.return_value = False

    response = await client.post(f"{USERS}/forgot-password", json={"email": "ada@example.com"})

    assert response.status_code == 200
    verify = await client.get(f"{USERS}/verify-reset-token/{token_from_email(mock_email_service)}")
    assert verify.json()["valid"] is True


@pytest.mark.asyncio
async def test_reset_password_bogus_token(client):
    response = await client.post(
        f"{USERS}/reset-password", json={"token": "bogus-token", "new_password": PASSWORD}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "invalid_token"


@pytest.mark.asyncio
async def test_reset_password_expired_token(client, db_session, mock_email_service):
    created = await register(client)
    await client.post(f"{USERS}/forgot-password", json={"email": "ada@example.com"})
    raw_token = token_from_email(mock_email_service)

    result = await db_session.execute(select(AccountModel).where(AccountModel.id == created["id"]))
    account = result.scalar_one()
    account.reset_token_expiry = datetime.now(timezone.utc) - timedelta(seconds=1)
    await db_session.commit()

    response = await client.post(
        f"{USERS}/reset-password", json={"token": raw_token, "new_password": "Brand-N3w!"}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "token_expired"


@pytest.mark.asyncio
async def test_reset_password_weak_password_keeps_token(client, mock_email_service):
    await register(client)
    await client.post(f"{USERS}/forgot-password", json={"email": "ada@example.com"})
    raw_token = token_from_email(mock_email_service)

    response = await client.post(
        f"{USERS}/reset-password", json={"token": raw_token, "new_password": "nouppercase1!"}
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["code"] == "password_no_uppercase"

    verify = await client.get(f"{USERS}/verify-reset-token/{raw_token}")
    assert verify.json()["valid"] is True


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "cid_test"})

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["X-Correlation-ID"] == "cid_test"
