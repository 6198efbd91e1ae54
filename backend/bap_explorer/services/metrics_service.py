"""BAP Explorer — MetricsService."""
from bap_explorer.schemas.metrics import NetworkMetrics
from bap_explorer.sources.base import ChainSource


class MetricsService:

    @staticmethod
    def get_metrics(chain: ChainSource) -> NetworkMetrics:
        return chain.metrics()
