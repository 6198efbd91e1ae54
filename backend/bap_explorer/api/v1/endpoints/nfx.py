"""BAP Explorer — NFX endpoints. GET /nfx, GET /nfx/{id}."""
from fastapi import APIRouter, Depends

from bap_explorer.api.deps import get_app_settings, get_chain
from bap_explorer.config import Settings
from bap_explorer.schemas.nfx import NfxDetailResponse, NfxList
from bap_explorer.services.nfx_service import NfxService
from bap_explorer.sources.base import ChainSource

router = APIRouter()


@router.get("", response_model=NfxList)
async def list_nfx(
    page: int = 1,
    limit: int = 12,
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """List the NFX catalog."""
    window = NfxService.list_nfx(chain, settings, page=page, limit=limit)
    return NfxList(nfx=window.items, total=window.total)


@router.get("/{id}", response_model=NfxDetailResponse)
async def get_nfx(
    id: str,
    chain: ChainSource = Depends(get_chain),
):
    """Get NFX status with statistics, governance, events, assets, partners and subspaces."""
    return NfxDetailResponse(nfx=NfxService.get_nfx(chain, id))
