"""BAP Explorer — API v1 router aggregation."""
from fastapi import APIRouter

from bap_explorer.api.v1.endpoints import assets, blocks, metrics, nfx, transactions, validators
from bap_explorer.schemas.common import ErrorResponse

# documented on every route; bodies come from core.responses
ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}

api_router = APIRouter(responses=ERROR_RESPONSES)

api_router.include_router(blocks.router, prefix="/blocks", tags=["blocks"])
api_router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
api_router.include_router(validators.pools_router, prefix="/pools", tags=["pools"])
api_router.include_router(validators.penalties_router, prefix="/penalties", tags=["penalties"])
api_router.include_router(nfx.router, prefix="/nfx", tags=["nfx"])
api_router.include_router(assets.tokens_router, prefix="/tokens", tags=["tokens"])
api_router.include_router(assets.nfts_router, prefix="/nfts", tags=["nfts"])
api_router.include_router(assets.contracts_router, prefix="/contracts", tags=["contracts"])
api_router.include_router(assets.history_router, prefix="/history", tags=["history"])
api_router.include_router(metrics.router, prefix="/metrics", tags=["metrics"])
