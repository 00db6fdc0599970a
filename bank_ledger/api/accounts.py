"""
Account API endpoints.

The API layer is thin. It handles HTTP concerns (status codes,
response formatting) and delegates everything else to the
AccountService.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse

from bank_ledger.dependencies import get_account_service
from bank_ledger.models.exceptions import AccountNotFoundError
from bank_ledger.schemas.account import (
    AccountOpen,
    AccountRename,
    AccountResponse,
    AccountSettingsResponse,
    AccountSettingsUpdate,
    AdmissionResponse,
    TransactionCreate,
    TransactionResponse,
)
from bank_ledger.services.account_service import AccountService

router = APIRouter(tags=["Accounts"])


@router.get("/accounts", response_model=list[int])
def list_accounts(service: AccountService = Depends(get_account_service)):
    """List the ids of all accounts, ascending."""
    return service.list_account_ids()


@router.post("/accounts", response_model=AccountResponse, status_code=201)
def open_account(
    request: AccountOpen | None = None,
    service: AccountService = Depends(get_account_service),
):
    """Open a new account with default fee settings and no history."""
    nickname = request.nickname if request else ""
    return AccountResponse.from_domain(service.open_account(nickname))


@router.get("/accounts/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    """Get account details, including balance and full history."""
    try:
        return AccountResponse.from_domain(service.get_account(account_id))
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/accounts/{account_id}", status_code=204)
def delete_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    try:
        service.close_account(account_id)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)


@router.patch("/accounts/{account_id}", response_model=AccountResponse)
def rename_account(
    account_id: int,
    request: AccountRename,
    service: AccountService = Depends(get_account_service),
):
    """Change an account's nickname."""
    try:
        account = service.rename_account(account_id, request.nickname)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return AccountResponse.from_domain(account)


@router.put("/accounts/{account_id}/settings", response_model=AccountResponse)
def update_settings(
    account_id: int,
    request: AccountSettingsUpdate,
    service: AccountService = Depends(get_account_service),
):
    """Replace an account's fees. Omitted fees are left as they are."""
    changes = request.model_dump(exclude_none=True)
    try:
        account = service.update_settings(account_id, **changes)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return AccountResponse.from_domain(account)


@router.get(
    "/accounts/{account_id}/transactions",
    response_model=list[TransactionResponse],
)
def get_transactions(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    """Get an account's transactions in the order they were recorded."""
    try:
        transactions = service.get_transactions(account_id)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [TransactionResponse.from_domain(t) for t in transactions]


@router.post(
    "/accounts/{account_id}/transactions",
    response_model=AdmissionResponse,
    status_code=201,
    responses={400: {"model": AdmissionResponse}},
)
def add_transaction(
    account_id: int,
    request: TransactionCreate,
    service: AccountService = Depends(get_account_service),
):
    """
    Offer a transaction to an account.

    Returns 201 when it was recorded and 400 when it was
    rejected. A rejected withdrawal that overdraws the account
    still records an overdraft fee; the returned balance
    reflects it.
    """
    try:
        result, account = service.add_transaction(
            account_id, request.kind, request.amount
        )
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    body = AdmissionResponse(
        account_id=account.id,
        outcome=result,
        applied=result.applied,
        balance=account.balance,
    )
    if not result.applied:
        return JSONResponse(status_code=400, content=body.model_dump(mode="json"))
    return body


@router.get("/settings/default", response_model=AccountSettingsResponse)
def get_default_settings(service: AccountService = Depends(get_account_service)):
    """Fee settings every new account starts with."""
    return AccountSettingsResponse.from_domain(
        service.repository.get_default_settings()
    )
