"""Account service: CRUD, partial updates and soft-delete visibility.

Invariants:
    - Deleted accounts vanish from get and list
    - Blank update fields keep stored values
    - Duplicate email is an insert failure, not an internal error
"""

from uuid import uuid4

import pytest

from pm_api.core.errors import (
    InsertFailedError, ResourceNotFoundError, UpdateFailedError,
    ValidationFailedError,
)
from pm_api.models.account import Account
from pm_api.schemas.account import AccountCreate, AccountUpdate
from pm_api.services import accounts


async def test_create_account_persists_and_returns_row(test_db):
    acc = await accounts.create_account(
        test_db, AccountCreate(email="ana@example.com", name="Ana"),
    )
    assert acc.id is not None
    assert acc.avatar == ""
    assert acc.deleted is False

    fetched = await accounts.get_account(test_db, str(acc.id))
    assert fetched.email == "ana@example.com"


async def test_create_account_rejects_blank_email(test_db):
    with pytest.raises(ValidationFailedError) as exc:
        await accounts.create_account(
            test_db, AccountCreate(email="  ", name="Ana"),
        )
    assert exc.value.field == "email"


async def test_create_account_rejects_blank_name(test_db):
    with pytest.raises(ValidationFailedError):
        await accounts.create_account(
            test_db, AccountCreate(email="ana@example.com", name=""),
        )


async def test_duplicate_email_is_insert_failure(test_db, seed_account):
    with pytest.raises(InsertFailedError):
        await accounts.create_account(
            test_db, AccountCreate(email=seed_account.email, name="Other"),
        )
    # Session still usable after the rollback
    assert len(await accounts.list_accounts(test_db)) == 1


async def test_get_account_invalid_id(test_db):
    with pytest.raises(ValidationFailedError):
        await accounts.get_account(test_db, "invalid-id")


async def test_get_account_missing(test_db):
    with pytest.raises(ResourceNotFoundError):
        await accounts.get_account(test_db, str(uuid4()))


async def test_list_accounts_skips_deleted(test_db, seed_account):
    test_db.add(Account(email="gone@example.com", name="Gone", deleted=True))
    await test_db.commit()

    result = await accounts.list_accounts(test_db)

    assert [a.id for a in result] == [seed_account.id]


async def test_list_accounts_paginates(test_db):
    for i in range(3):
        await accounts.create_account(
            test_db, AccountCreate(email=f"u{i}@example.com", name=f"U{i}"),
        )
    assert len(await accounts.list_accounts(test_db, limit=2)) == 2
    assert len(await accounts.list_accounts(test_db, limit=2, offset=2)) == 1


async def test_update_account_is_partial(test_db, seed_account):
    updated = await accounts.update_account(
        test_db, str(seed_account.id), AccountUpdate(name="Renamed", email=""),
    )
    assert updated.name == "Renamed"
    assert updated.email == "owner@example.com"


async def test_update_account_bumps_updated_at(test_db, seed_account):
    before = seed_account.updated_at
    updated = await accounts.update_account(
        test_db, str(seed_account.id), AccountUpdate(avatar="https://img/a.png"),
    )
    assert updated.avatar == "https://img/a.png"
    assert updated.updated_at.replace(tzinfo=None) >= before.replace(tzinfo=None)


async def test_update_missing_account_fails(test_db):
    with pytest.raises(UpdateFailedError):
        await accounts.update_account(
            test_db, str(uuid4()), AccountUpdate(name="x"),
        )


async def test_update_account_to_taken_email_fails(test_db, seed_account):
    other = await accounts.create_account(
        test_db, AccountCreate(email="b@example.com", name="B"),
    )
    with pytest.raises(UpdateFailedError):
        await accounts.update_account(
            test_db, str(other.id), AccountUpdate(email=seed_account.email),
        )


async def test_delete_account_is_soft(test_db, seed_account):
    await accounts.delete_account(test_db, str(seed_account.id))

    with pytest.raises(ResourceNotFoundError):
        await accounts.get_account(test_db, str(seed_account.id))
    row = await test_db.get(Account, seed_account.id, populate_existing=True)
    assert row is not None
    assert row.deleted is True


async def test_delete_account_twice_fails(test_db, seed_account):
    await accounts.delete_account(test_db, str(seed_account.id))
    with pytest.raises(UpdateFailedError):
        await accounts.delete_account(test_db, str(seed_account.id))


async def test_delete_account_invalid_id(test_db):
    with pytest.raises(ValidationFailedError):
        await accounts.delete_account(test_db, "nope")
