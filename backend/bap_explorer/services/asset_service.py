"""BAP Explorer — AssetService (tokens, NFTs, contracts, asset history)."""
from bap_explorer.config import Settings
from bap_explorer.core.errors import NotFound
from bap_explorer.schemas.asset import Contract, ContractMethod, EvolutionEvent, Nft, Token, TokenTransfer
from bap_explorer.services.identifiers import parse_address, parse_asset_id
from bap_explorer.services.pagination import Window, paginate_bounded
from bap_explorer.sources.base import ChainSource


class AssetService:

    @staticmethod
    def get_token(
        chain: ChainSource, settings: Settings, address: str | None = None
    ) -> tuple[Token, list[TokenTransfer]]:
        """Token and its recent transfers. No address means the configured BAP token."""
        resolved = parse_address(address or settings.TOKEN_CONTRACT)
        token = chain.token(resolved)
        if token is None:
            raise NotFound(f"Token {resolved} not found")
        return token, chain.token_transfers(resolved)

    @staticmethod
    def list_nfts(chain: ChainSource, settings: Settings, page: int = 1, limit: int = 12) -> Window[Nft]:
        return paginate_bounded(chain.nft_count(), page, limit, chain.nft, max_limit=settings.MAX_PAGE_LIMIT)

    @staticmethod
    def get_contract(
        chain: ChainSource, settings: Settings, address: str | None = None
    ) -> tuple[Contract, list[ContractMethod]]:
        resolved = parse_address(address or settings.NFT_CONTRACT)
        contract = chain.contract(resolved)
        if contract is None:
            raise NotFound(f"Contract {resolved} not found")
        return contract, chain.contract_methods(contract)

    @staticmethod
    def get_history(
        chain: ChainSource, settings: Settings, asset_id: str | None, page: int = 1, limit: int = 20
    ) -> Window[EvolutionEvent]:
        """Evolution events of one asset, oldest first."""
        resolved = parse_asset_id(asset_id)
        events = chain.asset_history(resolved)
        if events is None:
            raise NotFound(f"Asset {resolved} not found")
        return paginate_bounded(len(events), page, limit, events.__getitem__, max_limit=settings.MAX_PAGE_LIMIT)
