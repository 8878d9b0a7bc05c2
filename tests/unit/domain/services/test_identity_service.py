"""Unit tests for IdentityService."""

import pytest
from sqlalchemy import func, select

from studyfi.domain.entities.account import AccountProfile
from studyfi.domain.exceptions import NotFoundError, PasswordPolicyViolation
from studyfi.domain.services import IdentityService
from studyfi.infrastructure.auth.password_hasher import verify_password
from studyfi.infrastructure.persistence.models import AccountModel

PASSWORD = "Passw0rd!"


def make_profile(**overrides) -> AccountProfile:
    fields = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": PASSWORD,
        "country": "UK",
    }
    fields.update(overrides)
    return AccountProfile(**fields)


async def count_accounts(session) -> int:
    result = await session.execute(select(func.count()).select_from(AccountModel))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_register_persists_hashed_password(db_session):
    service = IdentityService(db_session)

    account = await service.register(make_profile())

    assert account.id
    assert account.name == "Ada Lovelace"
    assert account.country == "UK"
    assert account.password_hash != PASSWORD
    assert verify_password(PASSWORD, account.password_hash)
    assert account.reset_token is None
    assert account.reset_token_expiry is None
    assert account.groups == []


@pytest.mark.asyncio
async def test_register_rejects_weak_password_without_writing(db_session):
    service = IdentityService(db_session)

    with pytest.raises(PasswordPolicyViolation) as exc_info:
        await service.register(make_profile(password="weakpass"))

    assert exc_info.value.code == "password_no_digit"
    assert await count_accounts(db_session) == 0


@pytest.mark.asyncio
async def test_register_allows_duplicate_email(db_session):
    service = IdentityService(db_session)

    first = await service.register(make_profile())
    second = await service.register(make_profile(name="Someone Else"))

    assert first.id != second.id
    assert await count_accounts(db_session) == 2


@pytest.mark.asyncio
async def test_get_account_not_found(db_session):
    service = IdentityService(db_session)

    with pytest.raises(NotFoundError) as exc_info:
        await service.get_account("missing")

    assert exc_info.value.entity == "Account"
    assert str(exc_info.value) == "Account not found"


@pytest.mark.asyncio
async def test_list_accounts(db_session):
    service = IdentityService(db_session)
    assert await service.list_accounts() == []

    await service.register(make_profile(email="a@example.com"))
    await service.register(make_profile(email="b@example.com"))

    accounts = await service.list_accounts()
    assert [a.email for a in accounts] == ["a@example.com", "b@example.com"]


@pytest.mark.asyncio
async def test_update_profile_overwrites_fields(db_session):
    service = IdentityService(db_session)
    account = await service.register(make_profile())
    old_hash = account.password_hash

    updated = await service.update_profile(
        account.id,
        make_profile(name="Ada King", email="ada.king@example.com", country=None, about_me="Hi"),
    )

    assert updated.id == account.id
    assert updated.name == "Ada King"
    assert updated.email == "ada.king@example.com"
    assert updated.country is None
    assert updated.about_me == "Hi"
    # Same password, fresh salt
    assert updated.password_hash != old_hash
    assert verify_password(PASSWORD, updated.password_hash)


@pytest.mark.asyncio
async def test_update_profile_weak_password_leaves_account_unchanged(db_session):
    service = IdentityService(db_session)
    account = await service.register(make_profile())
    old_hash = account.password_hash

    with pytest.raises(PasswordPolicyViolation):
        await service.update_profile(account.id, make_profile(name="Changed", password="short"))

    reloaded = await service.get_account(account.id)
    assert reloaded.name == "Ada Lovelace"
    assert reloaded.password_hash == old_hash


@pytest.mark.asyncio
async def test_update_profile_not_found(db_session):
    service = IdentityService(db_session)

    with pytest.raises(NotFoundError):
        await service.update_profile("missing", make_profile())
