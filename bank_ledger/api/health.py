"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from bank_ledger.dependencies import get_account_service
from bank_ledger.services.account_service import AccountService

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(service: AccountService = Depends(get_account_service)):
    """
    Return application health status including store availability.

    The store check confirms the backing file is still there.
    The repository rewrites it on every change, so a missing
    file means the next write is likely to fail too.
    """
    repository = service.repository
    store_status = "healthy" if repository.path.is_file() else "unhealthy"

    return {
        "status": "healthy" if store_status == "healthy" else "degraded",
        "service": "bank-ledger",
        "store": store_status,
        "accounts": len(repository.list_accounts()),
    }
