"""BAP Explorer — Transaction endpoints. GET /transactions, GET /transactions/{tx_hash}."""
from fastapi import APIRouter, Depends, Query

from bap_explorer.api.deps import get_app_settings, get_chain
from bap_explorer.config import Settings
from bap_explorer.schemas.transaction import TransactionDetail, TransactionList
from bap_explorer.services.transaction_service import TransactionService
from bap_explorer.sources.base import ChainSource

router = APIRouter()


@router.get("", response_model=TransactionList | TransactionDetail)
async def list_transactions(
    page: int = 1,
    limit: int = 20,
    tx_hash: str | None = Query(None, alias="txHash"),
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """List transactions most recent first, or one transaction when txHash is given."""
    if tx_hash is not None:
        return TransactionDetail(transaction=TransactionService.get_transaction(chain, tx_hash))
    window = TransactionService.list_transactions(chain, settings, page=page, limit=limit)
    return TransactionList(transactions=window.items, total=window.total)


@router.get("/{tx_hash}", response_model=TransactionDetail)
async def get_transaction(
    tx_hash: str,
    chain: ChainSource = Depends(get_chain),
):
    """Get transaction by hash."""
    return TransactionDetail(transaction=TransactionService.get_transaction(chain, tx_hash))
