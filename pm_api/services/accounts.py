"""Account data access: get, list, create, partial update, soft delete.

Invariants:
    - email and name are required and non-blank on create
    - Duplicate email -> InsertFailedError on create, UpdateFailedError on update
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.core.errors import InsertFailedError
from pm_api.models.account import Account
from pm_api.schemas.account import AccountCreate, AccountUpdate
from pm_api.services.common import (
    DEFAULT_LIMIT, apply_update, changed_fields, get_active, list_active,
    parse_id, require_text, soft_delete, write_transaction,
)

logger = logging.getLogger(__name__)

RESOURCE = "Account"


async def get_account(db: AsyncSession, account_id: str) -> Account:
    return await get_active(db, Account, parse_id(account_id, "id"), RESOURCE)


async def list_accounts(
    db: AsyncSession, limit: int = DEFAULT_LIMIT, offset: int = 0,
) -> list[Account]:
    return await list_active(db, Account, limit=limit, offset=offset)


async def create_account(db: AsyncSession, data: AccountCreate) -> Account:
    account = Account(
        email=require_text(data.email, "email"),
        name=require_text(data.name, "name"),
        avatar=(data.avatar or "").strip(),
    )
    async with write_transaction(
        db, InsertFailedError(RESOURCE, "email is already registered"),
    ):
        db.add(account)
    await db.refresh(account)
    logger.info(
        f"Account {account.id} created",
        extra={"resource": RESOURCE, "resource_id": str(account.id)},
    )
    return account


async def update_account(
    db: AsyncSession, account_id: str, data: AccountUpdate,
) -> Account:
    """Patch email/name/avatar; blank fields keep their stored value."""
    entity_id = parse_id(account_id, "id")
    values = changed_fields(data)
    await apply_update(db, Account, entity_id, values, RESOURCE)
    return await get_active(db, Account, entity_id, RESOURCE)


async def delete_account(db: AsyncSession, account_id: str) -> None:
    await soft_delete(db, Account, parse_id(account_id, "id"), RESOURCE)
