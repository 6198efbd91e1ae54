"""BAP Explorer — Block endpoints. GET /blocks, GET /blocks/{block_id}."""
from fastapi import APIRouter, Depends, Query

from bap_explorer.api.deps import get_app_settings, get_chain
from bap_explorer.config import Settings
from bap_explorer.schemas.block import BlockDetail, BlockList
from bap_explorer.services.block_service import BlockService
from bap_explorer.sources.base import ChainSource

router = APIRouter()


@router.get("", response_model=BlockList | BlockDetail)
async def list_blocks(
    page: int = 1,
    limit: int = 20,
    block_id: str | None = Query(None, alias="blockId"),
    chain: ChainSource = Depends(get_chain),
    settings: Settings = Depends(get_app_settings),
):
    """List blocks newest-first, or a single block when blockId is given."""
    if block_id is not None:
        return BlockDetail(block=BlockService.get_block(chain, block_id))
    window = BlockService.list_blocks(chain, settings, page=page, limit=limit)
    return BlockList(blocks=window.items, total=window.total)


@router.get("/{block_id}", response_model=BlockDetail)
async def get_block(
    block_id: str,
    chain: ChainSource = Depends(get_chain),
):
    """Get block by height."""
    return BlockDetail(block=BlockService.get_block(chain, block_id))
