"""BAP Explorer — NfxService (catalog listing and composite detail)."""
import logging

from bap_explorer.config import Settings
from bap_explorer.core.errors import NotFound
from bap_explorer.schemas.nfx import Nfx, NfxDetail
from bap_explorer.services.identifiers import parse_nfx_id
from bap_explorer.services.pagination import Window, paginate_bounded
from bap_explorer.sources.base import ChainSource

logger = logging.getLogger(__name__)


class NfxService:
    """NFX catalog numbered 1..NFX_COUNT.

    List entries are projections of the detail record, so counts shown in the
    catalog always match the nested collections of the detail view.
    """

    @staticmethod
    def list_nfx(chain: ChainSource, settings: Settings, page: int = 1, limit: int = 12) -> Window[Nfx]:
        def summary_at(position: int) -> Nfx:
            detail = chain.nfx_detail(position + 1)
            if detail is None:
                raise NotFound(f"NFX catalog entry nfx-{position + 1} is missing")
            return detail.summary()

        return paginate_bounded(chain.nfx_count(), page, limit, summary_at, max_limit=settings.MAX_PAGE_LIMIT)

    @staticmethod
    def get_nfx(chain: ChainSource, raw_id: str | None) -> NfxDetail:
        number = parse_nfx_id(raw_id)
        detail = chain.nfx_detail(number)
        if detail is None:
            raise NotFound("NFX not found")
        logger.debug(
            "Resolved nfx-%d: %d assets, %d partners, %d subspaces",
            number, detail.assets_count, detail.partners, detail.subspaces,
        )
        return detail
