"""BAP Explorer — ValidatorService (validation pools and penalties)."""
import logging

from bap_explorer.config import Settings
from bap_explorer.schemas.validator import Penalty, PenaltyType, PoolStatus, ValidationPool
from bap_explorer.services.filters import attribute_filter
from bap_explorer.services.pagination import Window, paginate_bounded, paginate_generative
from bap_explorer.sources.base import ChainSource

logger = logging.getLogger(__name__)


class ValidatorService:
    """Pool catalog (exact totals) and penalty feed (estimated totals)."""

    @staticmethod
    def list_pools(
        chain: ChainSource,
        settings: Settings,
        *,
        status: PoolStatus | None = None,
        page: int = 1,
        limit: int = 12,
    ) -> Window[ValidationPool]:
        """Status filter applies to the whole catalog, then the page is cut."""
        return paginate_bounded(
            chain.pool_count(),
            page,
            limit,
            chain.pool,
            attribute_filter("status", status),
            max_limit=settings.MAX_PAGE_LIMIT,
        )

    @staticmethod
    def list_penalties(
        chain: ChainSource,
        settings: Settings,
        *,
        penalty_type: PenaltyType | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> Window[Penalty]:
        window = paginate_generative(
            page,
            limit,
            chain.penalty,
            attribute_filter("type", penalty_type),
            max_attempts=settings.PENALTY_SCAN_LIMIT,
            total=chain.penalty_total(),
            max_limit=settings.MAX_PAGE_LIMIT,
        )
        if penalty_type is not None and len(window.items) < limit:
            logger.info(
                "Penalty scan for type=%s hit the %d-attempt cap with %d items",
                penalty_type.value, settings.PENALTY_SCAN_LIMIT, len(window.items),
            )
        return window
