"""BAP Explorer — Network metrics endpoint."""
from fastapi import APIRouter, Depends

from bap_explorer.api.deps import get_chain
from bap_explorer.schemas.metrics import NetworkMetrics
from bap_explorer.services.metrics_service import MetricsService
from bap_explorer.sources.base import ChainSource

router = APIRouter()


@router.get("", response_model=NetworkMetrics)
async def get_metrics(chain: ChainSource = Depends(get_chain)):
    """Network-wide counters for the dashboard."""
    return MetricsService.get_metrics(chain)
