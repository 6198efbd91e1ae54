"""BAP Explorer — Async HTTP client for the explorer API.

Every failure leaves this module as one of TransportFailure, UpstreamFailure
or DecodeFailure so callers can tell them apart.
"""
import logging
from enum import Enum
from typing import Any, Mapping, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from bap_explorer.config import Settings
from bap_explorer.core.errors import DecodeFailure, TransportFailure, UpstreamFailure
from bap_explorer.schemas.asset import ContractDetail, HistoryList, NftList, TokenDetail
from bap_explorer.schemas.block import BlockDetail, BlockList
from bap_explorer.schemas.metrics import NetworkMetrics
from bap_explorer.schemas.nfx import NfxDetailResponse, NfxList
from bap_explorer.schemas.transaction import TransactionDetail, TransactionList
from bap_explorer.schemas.validator import PenaltyList, PenaltyType, PoolList, PoolStatus

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

API_PREFIX = "/api/v1"


class ExplorerClient:
    """Thin typed wrapper over httpx.AsyncClient, one method per endpoint."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "ExplorerClient":
        return cls(settings.API_URL, timeout=settings.CLIENT_TIMEOUT_SECONDS, **kwargs)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ExplorerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── Blocks & transactions ────────────────────────────────────────────────

    async def list_blocks(self, page: int = 1, limit: int = 20) -> BlockList:
        return await self._get("/blocks", BlockList, {"page": page, "limit": limit})

    async def get_block(self, block_id: str | int) -> BlockDetail:
        return await self._get(f"/blocks/{_segment(block_id)}", BlockDetail)

    async def list_transactions(self, page: int = 1, limit: int = 20) -> TransactionList:
        return await self._get("/transactions", TransactionList, {"page": page, "limit": limit})

    async def get_transaction(self, tx_hash: str) -> TransactionDetail:
        return await self._get(f"/transactions/{_segment(tx_hash)}", TransactionDetail)

    # ── Validators ───────────────────────────────────────────────────────────

    async def list_pools(
        self, status: PoolStatus | str | None = None, page: int = 1, limit: int = 12
    ) -> PoolList:
        return await self._get("/pools", PoolList, {"status": status, "page": page, "limit": limit})

    async def list_penalties(
        self, page: int = 1, limit: int = 20, type: PenaltyType | str | None = None
    ) -> PenaltyList:
        return await self._get("/penalties", PenaltyList, {"page": page, "limit": limit, "type": type})

    # ── NFX ──────────────────────────────────────────────────────────────────

    async def list_nfx(self, page: int = 1, limit: int = 12) -> NfxList:
        return await self._get("/nfx", NfxList, {"page": page, "limit": limit})

    async def get_nfx(self, nfx_id: str) -> NfxDetailResponse:
        return await self._get(f"/nfx/{_segment(nfx_id)}", NfxDetailResponse)

    # ── Tokens, NFTs, contracts, history ─────────────────────────────────────

    async def get_token(self, address: str | None = None) -> TokenDetail:
        return await self._get("/tokens", TokenDetail, {"address": address})

    async def list_nfts(self, page: int = 1, limit: int = 12) -> NftList:
        return await self._get("/nfts", NftList, {"page": page, "limit": limit})

    async def get_contract(self, address: str | None = None) -> ContractDetail:
        return await self._get("/contracts", ContractDetail, {"address": address})

    async def get_history(self, asset_id: str, page: int = 1, limit: int = 20) -> HistoryList:
        return await self._get("/history", HistoryList, {"assetId": asset_id, "page": page, "limit": limit})

    async def get_metrics(self) -> NetworkMetrics:
        return await self._get("/metrics", NetworkMetrics)

    # ── Transport ────────────────────────────────────────────────────────────

    async def _get(self, path: str, model: type[M], params: Mapping[str, Any] | None = None) -> M:
        url = API_PREFIX + path
        query = {
            key: value.value if isinstance(value, Enum) else value
            for key, value in (params or {}).items()
            if value is not None
        }
        logger.debug("GET %s %s", url, query)
        try:
            response = await self._http.get(url, params=query)
        except httpx.TimeoutException as exc:
            raise TransportFailure(f"Timed out requesting {url}") from exc
        except httpx.RequestError as exc:
            raise TransportFailure(f"Could not reach {url}: {exc}") from exc

        if not response.is_success:
            raise UpstreamFailure(_error_message(response), response.status_code)

        try:
            return model.model_validate(response.json())
        except ValueError as exc:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            raise DecodeFailure(f"Unexpected response body from {url}: {exc}") from exc


def _segment(value: str | int) -> str:
    return quote(str(value), safe="")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"HTTP error! status: {response.status_code}"
