"""BAP Explorer — Token, NFT, contract and asset history schemas."""
from datetime import datetime
from enum import Enum

from pydantic import Field

from bap_explorer.schemas.common import CamelModel


class Token(CamelModel):
    id: str
    symbol: str
    name: str
    address: str
    total_supply: str
    decimals: int
    holders: int


class TokenTransfer(CamelModel):
    id: str
    from_: str = Field(alias="from")
    to: str
    amount: str
    timestamp: datetime
    tx_hash: str


class TokenDetail(CamelModel):
    token: Token
    transfers: list[TokenTransfer]


class NftMetadata(CamelModel):
    image: str | None = None
    description: str | None = None


class Nft(CamelModel):
    id: str
    name: str
    owner: str
    token_id: str
    contract: str
    metadata: NftMetadata


class NftList(CamelModel):
    nfts: list[Nft]
    total: int


class ContractType(str, Enum):
    NFT = "NFT"
    TOKEN = "Token"
    GAME = "Game"
    OTHER = "Other"


class Contract(CamelModel):
    id: str
    address: str
    name: str
    type: ContractType
    verified: bool
    deployed_at: datetime
    transaction_count: int
    creator: str


class ContractMethod(CamelModel):
    name: str
    type: str
    inputs: list[str]
    outputs: list[str]


class ContractDetail(CamelModel):
    contract: Contract
    methods: list[ContractMethod]


class EvolutionEventType(str, Enum):
    MINTED = "minted"
    TRANSFERRED = "transferred"
    EVOLVED = "evolved"
    BURNED = "burned"


class EvolutionEvent(CamelModel):
    id: str
    asset_id: str
    event_type: EvolutionEventType
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    timestamp: datetime
    tx_hash: str
    metadata: dict | None = None


class HistoryList(CamelModel):
    events: list[EvolutionEvent]
    total: int
