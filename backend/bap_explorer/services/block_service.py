"""BAP Explorer — BlockService (list newest-first, lookup by height)."""
import logging

from bap_explorer.config import Settings
from bap_explorer.core.errors import NotFound
from bap_explorer.schemas.block import Block
from bap_explorer.services.identifiers import parse_block_height
from bap_explorer.services.pagination import Window, paginate_descending
from bap_explorer.sources.base import ChainSource

logger = logging.getLogger(__name__)


class BlockService:
    """Blocks counted down from the current height."""

    @staticmethod
    def list_blocks(chain: ChainSource, settings: Settings, page: int = 1, limit: int = 20) -> Window[Block]:
        top = chain.current_height()
        logger.debug("Listing blocks top=%d page=%d limit=%d", top, page, limit)
        return paginate_descending(top, page, limit, chain.block, max_limit=settings.MAX_PAGE_LIMIT)

    @staticmethod
    def get_block(chain: ChainSource, block_id: str | int) -> Block:
        height = parse_block_height(block_id)
        block = chain.block(height)
        if block is None:
            raise NotFound(f"Block {height} not found")
        return block
