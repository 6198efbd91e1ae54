"""BAP Explorer — Token, NFT, contract and asset history endpoints."""
from fastapi import APIRouter, Depends, Query

from bap_explorer.api.deps import get_app_settings, get_chain
from bap_explorer.config import Settings
from bap_explorer.schemas.asset import ContractDetail, HistoryList, NftList, TokenDetail
from bap_explorer.services.asset_service import AssetService
from bap_explorer.sources.base import ChainSource

tokens_router = APIRouter()
nfts_router = APIRouter()
contracts_router = APIRouter()
history_router = APIRouter()


@tokens_router.get("", response_model=TokenDetail)
async def get_token(
    address: str | None = None,
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """Token by contract address (defaults to the BAP token) with recent transfers."""
    token, transfers = AssetService.get_token(chain, settings, address)
    return TokenDetail(token=token, transfers=transfers)


@nfts_router.get("", response_model=NftList)
async def list_nfts(
    page: int = 1,
    limit: int = 12,
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """List NFTs of the configured collection."""
    window = AssetService.list_nfts(chain, settings, page=page, limit=limit)
    return NftList(nfts=window.items, total=window.total)


@contracts_router.get("", response_model=ContractDetail)
async def get_contract(
    address: str | None = None,
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """Contract by address (defaults to the NFT contract) with its method table."""
    contract, methods = AssetService.get_contract(chain, settings, address)
    return ContractDetail(contract=contract, methods=methods)


@history_router.get("", response_model=HistoryList)
async def get_history(
    asset_id: str | None = Query(None, alias="assetId"),
    page: int = 1,
    limit: int = 20,
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """Evolution history of one asset, oldest first."""
    window = AssetService.get_history(chain, settings, asset_id, page=page, limit=limit)
    return HistoryList(events=window.items, total=window.total)
