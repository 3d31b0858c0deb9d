"""Account routes: /api/v1/accounts."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.infrastructure.database import get_db
from pm_api.schemas.account import AccountCreate, AccountResponse, AccountUpdate
from pm_api.services import accounts as account_service
from pm_api.services.common import DEFAULT_LIMIT, MAX_LIMIT

router = APIRouter(prefix="/api/v1/accounts", tags=["accounts"])


@router.get("", response_model=list[AccountResponse])
async def list_accounts(
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List all active accounts."""
    return await account_service.list_accounts(db, limit=limit, offset=offset)


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(account_id: str, db: AsyncSession = Depends(get_db)):
    return await account_service.get_account(db, account_id)


@router.post(
    "", response_model=AccountResponse, status_code=status.HTTP_201_CREATED,
)
async def create_account(body: AccountCreate, db: AsyncSession = Depends(get_db)):
    return await account_service.create_account(db, body)


@router.patch("/{account_id}", response_model=AccountResponse)
async def update_account(
    account_id: str, body: AccountUpdate, db: AsyncSession = Depends(get_db),
):
    """Partially update an account. Blank fields are ignored."""
    return await account_service.update_account(db, account_id, body)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(account_id: str, db: AsyncSession = Depends(get_db)):
    """Soft-delete an account."""
    await account_service.delete_account(db, account_id)
