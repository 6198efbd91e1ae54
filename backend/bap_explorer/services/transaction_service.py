"""BAP Explorer — TransactionService (recency-ordered list, lookup by hash)."""
import logging

from bap_explorer.config import Settings
from bap_explorer.core.errors import NotFound
from bap_explorer.schemas.transaction import Transaction
from bap_explorer.services.identifiers import parse_tx_hash
from bap_explorer.services.pagination import Window, paginate_bounded
from bap_explorer.sources.base import ChainSource

logger = logging.getLogger(__name__)


class TransactionService:

    @staticmethod
    def list_transactions(
        chain: ChainSource, settings: Settings, page: int = 1, limit: int = 20
    ) -> Window[Transaction]:
        return paginate_bounded(chain.transaction_count(), page, limit, chain.transaction, max_limit=settings.MAX_PAGE_LIMIT)

    @staticmethod
    def get_transaction(chain: ChainSource, raw_hash: str) -> Transaction:
        tx_hash = parse_tx_hash(raw_hash)
        tx = chain.transaction_by_hash(tx_hash)
        if tx is None:
            logger.debug("Transaction %s did not resolve", tx_hash)
            raise NotFound(f"Transaction {tx_hash} not found")
        return tx
