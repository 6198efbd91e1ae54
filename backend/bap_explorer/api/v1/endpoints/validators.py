"""BAP Explorer — Validation pool and penalty endpoints. GET /pools, GET /penalties."""
from fastapi import APIRouter, Depends, Query

from bap_explorer.api.deps import get_app_settings, get_chain
from bap_explorer.config import Settings
from bap_explorer.schemas.validator import PenaltyList, PenaltyType, PoolList, PoolStatus
from bap_explorer.services.validator_service import ValidatorService
from bap_explorer.sources.base import ChainSource

pools_router = APIRouter()
penalties_router = APIRouter()


@pools_router.get("", response_model=PoolList)
async def list_pools(
    status: PoolStatus | None = None,
    page: int = 1,
    limit: int = 12,
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """List validation pools, optionally only active or inactive ones. total is the filtered count."""
    window = ValidatorService.list_pools(chain, settings, status=status, page=page, limit=limit)
    return PoolList(pools=window.items, total=window.total)


@penalties_router.get("", response_model=PenaltyList)
async def list_penalties(
    penalty_type: PenaltyType | None = Query(None, alias="type"),
    page: int = 1,
    limit: int = 20,
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """List penalties most recent first. total is an estimate, not a filtered count."""
    window = ValidatorService.list_penalties(chain, settings, penalty_type=penalty_type, page=page, limit=limit)
    return PenaltyList(penalties=window.items, total=window.total)
