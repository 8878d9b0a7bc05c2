"""Unit tests for AccountRepository and GroupRepository."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from studyfi.infrastructure.persistence.models import AccountModel, GroupModel
from studyfi.infrastructure.persistence.repositories import (
    AccountRepository,
    GroupRepository,
)

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_account(account_id: str, email: str, created_at: datetime = T0) -> AccountModel:
    return AccountModel(
        id=account_id,
        name=f"User {account_id}",
        email=email,
        password_hash="hash",
        created_at=created_at,
        updated_at=created_at,
    )


def make_group(group_id: str, name: str) -> GroupModel:
    return GroupModel(id=group_id, name=name, created_at=T0, updated_at=T0)


@pytest.mark.asyncio
async def test_get_by_id_returns_none_when_missing(db_session):
    repo = AccountRepository(db_session)
    assert await repo.get_by_id("missing") is None


@pytest.mark.asyncio
async def test_get_by_email_returns_oldest_match(db_session):
    repo = AccountRepository(db_session)
    await repo.create(make_account("newer", "dup@example.com", T0 + timedelta(days=1)))
    await repo.create(make_account("older", "dup@example.com", T0))
    await db_session.commit()

    account = await repo.get_by_email("dup@example.com")

    assert account is not None
    assert account.id == "older"
    assert await repo.get_by_email("other@example.com") is None


@pytest.mark.asyncio
async def test_get_by_reset_token(db_session):
    repo = AccountRepository(db_session)
    account = make_account("a1", "a1@example.com")
    account.reset_token = "f" * 64
    account.reset_token_expiry = T0 + timedelta(hours=1)
    await repo.create(account)
    await db_session.commit()

    found = await repo.get_by_reset_token("f" * 64)

    assert found is not None
    assert found.id == "a1"
    assert await repo.get_by_reset_token("0" * 64) is None


@pytest.mark.asyncio
async def test_reset_columns_must_be_set_together(db_session):
    repo = AccountRepository(db_session)
    account = make_account("a1", "a1@example.com")
    account.reset_token = "f" * 64

    with pytest.raises(IntegrityError):
        await repo.create(account)


@pytest.mark.asyncio
async def test_membership_rows(db_session):
    accounts = AccountRepository(db_session)
    groups = GroupRepository(db_session)
    await accounts.create(make_account("a1", "a1@example.com"))
    await groups.create(make_group("g1", "Zoology"))
    await groups.create(make_group("g2", "Botany"))

    await groups.add_member("g1", "a1")
    await groups.add_member("g2", "a1")
    await db_session.commit()

    assert await groups.is_member("g1", "a1") is True
    account = await accounts.get_by_id("a1")
    assert [g.name for g in account.groups] == ["Botany", "Zoology"]

    assert await groups.remove_member("g1", "a1") is True
    assert await groups.remove_member("g1", "a1") is False
    await db_session.commit()

    assert await groups.is_member("g1", "a1") is False
    group = await groups.get_by_id("g1")
    assert group.members == []
    account = await accounts.get_by_id("a1")
    assert [g.id for g in account.groups] == ["g2"]


@pytest.mark.asyncio
async def test_duplicate_membership_row_rejected(db_session):
    accounts = AccountRepository(db_session)
    groups = GroupRepository(db_session)
    await accounts.create(make_account("a1", "a1@example.com"))
    await groups.create(make_group("g1", "Zoology"))
    await groups.add_member("g1", "a1")
    await db_session.commit()

    db_session.expunge_all()
    with pytest.raises(IntegrityError):
        await groups.add_member("g1", "a1")
