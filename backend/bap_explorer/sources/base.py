"""BAP Explorer — Ordered resource source interface.

Services read chain data only through a `ChainSource`. Positional lookups
(`block`, `transaction`, `pool`, ...) address the source in its native order;
identifier lookups return None when the identifier is well-formed but does not
resolve.
"""
from abc import ABC, abstractmethod

from bap_explorer.schemas.asset import Contract, ContractMethod, EvolutionEvent, Nft, Token, TokenTransfer
from bap_explorer.schemas.block import Block
from bap_explorer.schemas.metrics import NetworkMetrics
from bap_explorer.schemas.nfx import NfxDetail
from bap_explorer.schemas.transaction import Transaction
from bap_explorer.schemas.validator import Penalty, ValidationPool


class ChainSource(ABC):

    # Blocks, newest first by height

    @abstractmethod
    def current_height(self) -> int: ...

    @abstractmethod
    def block(self, height: int) -> Block | None: ...

    # Transactions, index 0 is the most recent

    @abstractmethod
    def transaction_count(self) -> int: ...

    @abstractmethod
    def transaction(self, index: int) -> Transaction: ...

    @abstractmethod
    def transaction_by_hash(self, tx_hash: str) -> Transaction | None: ...

    # Validation pools, insertion order

    @abstractmethod
    def pool_count(self) -> int: ...

    @abstractmethod
    def pool(self, index: int) -> ValidationPool: ...

    # Penalties, unbounded, index 0 is the most recent

    @abstractmethod
    def penalty(self, index: int) -> Penalty | None:
        """Penalty at recency index; None once the feed has no older entries."""

    @abstractmethod
    def penalty_total(self) -> int:
        """Estimated number of penalties; not derived from a scan."""

    # NFX catalog, numbered from 1

    @abstractmethod
    def nfx_count(self) -> int: ...

    @abstractmethod
    def nfx_detail(self, number: int) -> NfxDetail | None: ...

    # Tokens, NFTs, contracts, asset history

    @abstractmethod
    def token(self, address: str) -> Token | None: ...

    @abstractmethod
    def token_transfers(self, address: str) -> list[TokenTransfer]: ...

    @abstractmethod
    def nft_count(self) -> int: ...

    @abstractmethod
    def nft(self, index: int) -> Nft: ...

    @abstractmethod
    def contract(self, address: str) -> Contract | None: ...

    @abstractmethod
    def contract_methods(self, contract: Contract) -> list[ContractMethod]: ...

    @abstractmethod
    def asset_history(self, asset_id: str) -> list[EvolutionEvent] | None: ...

    @abstractmethod
    def metrics(self) -> NetworkMetrics: ...
