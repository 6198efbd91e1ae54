"""BAP Explorer — Per-resource fetch controllers.

Each factory only fixes the request function, the initial parameters and the
empty payload shown before the first success.
"""
from typing import Any

from bap_explorer.client.api import ExplorerClient
from bap_explorer.client.fetcher import FetchController
from bap_explorer.schemas.asset import ContractDetail, HistoryList, NftList, TokenDetail
from bap_explorer.schemas.block import BlockDetail, BlockList
from bap_explorer.schemas.metrics import NetworkMetrics
from bap_explorer.schemas.nfx import NfxDetailResponse, NfxList
from bap_explorer.schemas.transaction import TransactionDetail, TransactionList
from bap_explorer.schemas.validator import PenaltyList, PenaltyType, PoolList, PoolStatus


def _has(key: str):
    return lambda params: params.get(key) not in (None, "")


def blocks(client: ExplorerClient, page: int = 1, limit: int = 20, **options: Any) -> FetchController[BlockList]:
    return FetchController(
        lambda params: client.list_blocks(**params),
        {"page": page, "limit": limit},
        default=BlockList(blocks=[], total=0),
        name="blocks",
        **options,
    )


def block(client: ExplorerClient, block_id: str | int | None, **options: Any) -> FetchController[BlockDetail | None]:
    return FetchController(
        lambda params: client.get_block(params["block_id"]),
        {"block_id": block_id},
        default=None,
        name="block",
        ready=_has("block_id"),
        **options,
    )


def transactions(
    client: ExplorerClient, page: int = 1, limit: int = 20, **options: Any
) -> FetchController[TransactionList]:
    return FetchController(
        lambda params: client.list_transactions(**params),
        {"page": page, "limit": limit},
        default=TransactionList(transactions=[], total=0),
        name="transactions",
        **options,
    )


def transaction(
    client: ExplorerClient, tx_hash: str | None, **options: Any
) -> FetchController[TransactionDetail | None]:
    return FetchController(
        lambda params: client.get_transaction(params["tx_hash"]),
        {"tx_hash": tx_hash},
        default=None,
        name="transaction",
        ready=_has("tx_hash"),
        **options,
    )


def pools(
    client: ExplorerClient,
    status: PoolStatus | str | None = None,
    page: int = 1,
    limit: int = 12,
    **options: Any,
) -> FetchController[PoolList]:
    return FetchController(
        lambda params: client.list_pools(**params),
        {"status": status, "page": page, "limit": limit},
        default=PoolList(pools=[], total=0),
        name="pools",
        **options,
    )


def penalties(
    client: ExplorerClient,
    page: int = 1,
    limit: int = 20,
    type: PenaltyType | str | None = None,
    **options: Any,
) -> FetchController[PenaltyList]:
    return FetchController(
        lambda params: client.list_penalties(**params),
        {"page": page, "limit": limit, "type": type},
        default=PenaltyList(penalties=[], total=0),
        name="penalties",
        **options,
    )


def nfx_list(client: ExplorerClient, page: int = 1, limit: int = 12, **options: Any) -> FetchController[NfxList]:
    return FetchController(
        lambda params: client.list_nfx(**params),
        {"page": page, "limit": limit},
        default=NfxList(nfx=[], total=0),
        name="nfx",
        **options,
    )


def nfx_status(
    client: ExplorerClient, nfx_id: str | None, **options: Any
) -> FetchController[NfxDetailResponse | None]:
    """Detail view; stays idle until an id is known."""
    return FetchController(
        lambda params: client.get_nfx(params["nfx_id"]),
        {"nfx_id": nfx_id},
        default=None,
        name="nfx-status",
        ready=_has("nfx_id"),
        **options,
    )


def token(client: ExplorerClient, address: str | None = None, **options: Any) -> FetchController[TokenDetail | None]:
    return FetchController(
        lambda params: client.get_token(**params),
        {"address": address},
        default=None,
        name="token",
        **options,
    )


def nfts(client: ExplorerClient, page: int = 1, limit: int = 12, **options: Any) -> FetchController[NftList]:
    return FetchController(
        lambda params: client.list_nfts(**params),
        {"page": page, "limit": limit},
        default=NftList(nfts=[], total=0),
        name="nfts",
        **options,
    )


def contract(
    client: ExplorerClient, address: str | None = None, **options: Any
) -> FetchController[ContractDetail | None]:
    return FetchController(
        lambda params: client.get_contract(**params),
        {"address": address},
        default=None,
        name="contract",
        **options,
    )


def history(
    client: ExplorerClient, asset_id: str | None, page: int = 1, limit: int = 20, **options: Any
) -> FetchController[HistoryList]:
    return FetchController(
        lambda params: client.get_history(**params),
        {"asset_id": asset_id, "page": page, "limit": limit},
        default=HistoryList(events=[], total=0),
        name="history",
        ready=_has("asset_id"),
        **options,
    )


def metrics(
    client: ExplorerClient,
    auto_refresh: bool = False,
    refresh_interval: float = 30.0,
    **options: Any,
) -> FetchController[NetworkMetrics | None]:
    """Dashboard counters; pass auto_refresh=True to poll."""
    return FetchController(
        lambda params: client.get_metrics(),
        default=None,
        name="metrics",
        auto_refresh=auto_refresh,
        refresh_interval=refresh_interval,
        **options,
    )
