"""BAP Explorer — Deterministic synthetic chain.

Stands in for a node RPC until the explorer is wired to a real chain. Every
record is a pure function of (CHAIN_SEED, kind, key), so list and detail views
of the same item agree and repeated requests are idempotent.
"""
import logging
from datetime import datetime, timedelta

from bap_explorer.config import Settings
from bap_explorer.schemas.asset import (
    Contract,
    ContractMethod,
    ContractType,
    EvolutionEvent,
    EvolutionEventType,
    Nft,
    NftMetadata,
    Token,
    TokenTransfer,
)
from bap_explorer.schemas.block import Block
from bap_explorer.schemas.metrics import NetworkMetrics
from bap_explorer.schemas.nfx import (
    DepositedAsset,
    NfxDetail,
    NfxEvent,
    NfxGovernance,
    NfxPartner,
    NfxStatistics,
    NfxSubspace,
)
from bap_explorer.schemas.transaction import Transaction, TransactionStatus
from bap_explorer.schemas.validator import Penalty, PenaltyType, PoolStatus, ValidationPool
from bap_explorer.sources.base import ChainSource
from bap_explorer.sources.seeding import address, amount, hex_digits, rng_for, tx_hash

logger = logging.getLogger(__name__)

BLOCK_INTERVAL = timedelta(minutes=3)
TRANSACTION_INTERVAL = timedelta(minutes=2)
PENALTY_INTERVAL = timedelta(hours=12)

# Minted transaction hashes end with the 16-hex-digit recency index.
TX_INDEX_DIGITS = 16

NFX_NAMES = (
    "Innovation District",
    "Creative Hub",
    "Tech Valley",
    "Art Quarter",
    "Business Center",
    "Gaming Arena",
    "Media Plaza",
    "Science Park",
    "Cultural Space",
    "Commerce Zone",
)

NFX_BRANDINGS = (
    "Technology",
    "Arts & Culture",
    "Business",
    "Gaming",
    "Education",
    "Finance",
    "Entertainment",
    "Health",
    "Sports",
    "Science",
)

NFX_EVENT_TYPES = ("Created", "Asset Deposited", "Partner Added", "Governance Vote", "Value Update")
NFX_ASSET_TYPES = ("NFT", "Token", "Contract", "Data")
NFX_SUBSPACE_STATUSES = ("Active", "Pending", "Inactive")
NFX_DECISIONS = (
    "Approved expansion to new sectors",
    "Updated branding guidelines",
    "New partner requirements established",
)
NFX_EVENT_COUNT = 10
NFX_PARTNERS_RANGE = (3, 12)
NFX_SUBSPACES_RANGE = (2, 9)
NFX_ASSETS_RANGE = (5, 20)

PENALTY_REASONS = {
    PenaltyType.SLASH: "Double signing detected",
    PenaltyType.JAIL: "Missed consecutive blocks",
    PenaltyType.DOWNTIME: "Extended node downtime",
}

# success is three times as likely as failed or pending
TX_STATUS_WEIGHTS = (
    TransactionStatus.SUCCESS,
    TransactionStatus.SUCCESS,
    TransactionStatus.SUCCESS,
    TransactionStatus.FAILED,
    TransactionStatus.PENDING,
)

NFT_DESCRIPTIONS = (
    "Example NFT from Block And Play",
    "Another example NFT",
    "Limited edition Block And Play collectible",
)

CONTRACT_METHODS: dict[ContractType, tuple[ContractMethod, ...]] = {
    ContractType.NFT: (
        ContractMethod(name="mint", type="write", inputs=["address to", "uint256 tokenId"], outputs=[]),
        ContractMethod(name="balanceOf", type="read", inputs=["address owner"], outputs=["uint256"]),
        ContractMethod(name="ownerOf", type="read", inputs=["uint256 tokenId"], outputs=["address"]),
        ContractMethod(
            name="transferFrom", type="write", inputs=["address from", "address to", "uint256 tokenId"], outputs=[]
        ),
    ),
    ContractType.TOKEN: (
        ContractMethod(name="totalSupply", type="read", inputs=[], outputs=["uint256"]),
        ContractMethod(name="balanceOf", type="read", inputs=["address owner"], outputs=["uint256"]),
        ContractMethod(name="transfer", type="write", inputs=["address to", "uint256 amount"], outputs=["bool"]),
        ContractMethod(name="approve", type="write", inputs=["address spender", "uint256 amount"], outputs=["bool"]),
    ),
    ContractType.GAME: (
        ContractMethod(name="joinGame", type="write", inputs=["uint256 gameId"], outputs=[]),
        ContractMethod(name="scoreOf", type="read", inputs=["address player"], outputs=["uint256"]),
    ),
    ContractType.OTHER: (
        ContractMethod(name="owner", type="read", inputs=[], outputs=["address"]),
    ),
}


class SyntheticChain(ChainSource):
    """ChainSource backed by seeded pseudo-random generation."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.seed = settings.CHAIN_SEED
        self.tip_time: datetime = settings.CHAIN_TIP_TIME
        # oldest penalty whose timestamp is still a representable datetime
        self.penalty_depth = (self.tip_time - datetime.min.replace(tzinfo=self.tip_time.tzinfo)) // PENALTY_INTERVAL
        logger.info(
            "Synthetic chain ready: network=%s seed=%s height=%d",
            settings.NETWORK, self.seed, settings.CURRENT_BLOCK_HEIGHT,
        )

    # ── Blocks ───────────────────────────────────────────────────────────────

    def current_height(self) -> int:
        return self.settings.CURRENT_BLOCK_HEIGHT

    def block(self, height: int) -> Block | None:
        if height < 1 or height > self.current_height():
            return None
        rng = rng_for(self.seed, "block", height)
        return Block(
            height=height,
            hash=tx_hash(rng),
            timestamp=self.tip_time - (self.current_height() - height) * BLOCK_INTERVAL,
            transactions=rng.randint(1, 50),
            validator=address(rng),
            size=rng.randint(10, 109),
        )

    # ── Transactions ─────────────────────────────────────────────────────────

    def transaction_count(self) -> int:
        return self.settings.TRANSACTION_COUNT

    def transaction(self, index: int) -> Transaction:
        rng = rng_for(self.seed, "tx", index)
        hash_ = "0x" + hex_digits(rng, 64 - TX_INDEX_DIGITS) + f"{index:0{TX_INDEX_DIGITS}x}"
        return self._transaction(rng, index, hash_)

    def transaction_by_hash(self, tx_hash: str) -> Transaction | None:
        tx_hash = tx_hash.lower()
        index = int(tx_hash[-TX_INDEX_DIGITS:], 16)
        if index < self.transaction_count():
            candidate = self.transaction(index)
            if candidate.hash == tx_hash:
                return candidate
        # Unknown hash: synthesize a fresh, hash-keyed record at the tip.
        return self._transaction(rng_for(self.seed, "tx-hash", tx_hash), 0, tx_hash)

    def _transaction(self, rng, index: int, hash_: str) -> Transaction:
        height = self.current_height() - (index * 2) // 3
        return Transaction(
            hash=hash_,
            from_=address(rng),
            to=address(rng),
            value=amount(rng, 0, 100, 4),
            block_height=max(1, height),
            timestamp=self.tip_time - index * TRANSACTION_INTERVAL,
            status=rng.choice(TX_STATUS_WEIGHTS),
            fee=amount(rng, 0, 0.01, 6),
        )

    # ── Validation pools and penalties ───────────────────────────────────────

    def pool_count(self) -> int:
        return self.settings.POOL_COUNT

    def pool(self, index: int) -> ValidationPool:
        rng = rng_for(self.seed, "pool", index)
        is_active = rng.random() > 0.3
        return ValidationPool(
            id=tx_hash(rng),
            name=f"Validation Pool {index + 1}",
            total_stake=amount(rng, 100000, 1100000, 2),
            validators=rng.randint(5, 54),
            commission=f"{rng.uniform(0, 10):.2f}%",
            status=PoolStatus.ACTIVE if is_active else PoolStatus.INACTIVE,
            performance=rng.randint(80, 99) if is_active else rng.randint(0, 49),
        )

    def penalty(self, index: int) -> Penalty | None:
        if index > self.penalty_depth:
            return None
        rng = rng_for(self.seed, "penalty", index)
        penalty_type = rng.choice(list(PenaltyType))
        return Penalty(
            id=f"penalty-{hex_digits(rng, 13)}",
            validator=address(rng),
            type=penalty_type,
            reason=PENALTY_REASONS[penalty_type],
            amount=amount(rng, 0, 10000, 2) if penalty_type is PenaltyType.SLASH else "N/A",
            block_height=rng.randint(1, self.current_height()),
            timestamp=self.tip_time - index * PENALTY_INTERVAL,
        )

    def penalty_total(self) -> int:
        return self.settings.PENALTY_TOTAL_ESTIMATE

    # ── NFX ──────────────────────────────────────────────────────────────────

    def nfx_count(self) -> int:
        return self.settings.NFX_COUNT

    def nfx_detail(self, number: int) -> NfxDetail | None:
        if number < 1:
            return None
        rng = rng_for(self.seed, "nfx", number)
        branding = NFX_BRANDINGS[number % len(NFX_BRANDINGS)]
        day = timedelta(days=1)

        events = []
        for i in range(NFX_EVENT_COUNT):
            events.append(NfxEvent(
                id=f"event-{i}",
                type=NFX_EVENT_TYPES[i % len(NFX_EVENT_TYPES)],
                description=f"Event {i + 1} description for this NFX",
                timestamp=self.tip_time - i * day,
                value=rng.randint(0, 9999) if rng.random() > 0.5 else None,
            ))

        deposited_assets = []
        for i in range(rng.randint(*NFX_ASSETS_RANGE)):
            deposited_assets.append(DepositedAsset(
                id=f"asset-{i}",
                type=NFX_ASSET_TYPES[i % len(NFX_ASSET_TYPES)],
                name=f"Asset {i + 1}",
                value=rng.randint(0, 49999),
            ))

        partners = []
        for i in range(rng.randint(*NFX_PARTNERS_RANGE)):
            partners.append(NfxPartner(
                address=address(rng),
                name=f"Partner {i + 1}",
                contribution=rng.randint(0, 99999),
            ))

        subspaces = []
        for i in range(rng.randint(*NFX_SUBSPACES_RANGE)):
            subspaces.append(NfxSubspace(
                id=f"subspace-{i}",
                name=f"Subspace {i + 1}",
                size=rng.randint(50, 1049),
                status=NFX_SUBSPACE_STATUSES[i % len(NFX_SUBSPACE_STATUSES)],
            ))

        return NfxDetail(
            id=f"nfx-{number}",
            name=f"{NFX_NAMES[number % len(NFX_NAMES)]} #{number}",
            owner=address(rng),
            size=rng.randint(100, 10099),
            reputation=rng.randint(0, 99),
            value=rng.randint(10000, 1009999),
            branding=branding,
            premium=rng.random() > 0.7,
            assets_count=len(deposited_assets),
            partners=len(partners),
            subspaces=len(subspaces),
            created_at=self.tip_time - rng.uniform(0, 365) * day,
            last_activity=self.tip_time - rng.uniform(0, 7) * day,
            description=(
                f"This is a {branding}-focused NFX (Non-Fungible eXpanding Island) that serves as a "
                "digital space for collaboration, trading, and community building within the "
                "Block And Play ecosystem."
            ),
            statistics=NfxStatistics(
                total_visits=rng.randint(1000, 100999),
                active_users=rng.randint(50, 1049),
                daily_transactions=rng.randint(10, 509),
                average_value=rng.randint(1000, 50999),
            ),
            governance=NfxGovernance(
                voting_power=rng.randint(0, 9999),
                proposals=rng.randint(0, 19),
                decisions=NFX_DECISIONS,
            ),
            events=tuple(events),
            deposited_assets=tuple(deposited_assets),
            partners_list=tuple(partners),
            subspaces_list=tuple(subspaces),
        )

    # ── Tokens, NFTs, contracts ──────────────────────────────────────────────

    def token(self, address_: str) -> Token | None:
        rng = rng_for(self.seed, "token", address_)
        token_id = hex_digits(rng, 8)
        if address_ == self.settings.TOKEN_CONTRACT.lower():
            return Token(
                id=token_id,
                symbol="BAP",
                name="Block And Play Token",
                address=address_,
                total_supply="1000000000",
                decimals=18,
                holders=1234,
            )
        symbol = "".join(rng.choice("ABCDEFGHIJKLMNOPQRSTUVWXYZ") for _ in range(3))
        return Token(
            id=token_id,
            symbol=symbol,
            name=f"{symbol} Token",
            address=address_,
            total_supply=str(rng.randint(10**6, 10**10)),
            decimals=rng.choice((6, 8, 18)),
            holders=rng.randint(1, 100000),
        )

    def token_transfers(self, address_: str) -> list[TokenTransfer]:
        rng = rng_for(self.seed, "token-transfers", address_)
        transfers = []
        for i in range(rng.randint(1, 10)):
            transfers.append(TokenTransfer(
                id=str(i + 1),
                from_=address(rng),
                to=address(rng),
                amount=str(rng.randint(1, 10000)),
                timestamp=self.tip_time - timedelta(minutes=37 * i + rng.randint(0, 36)),
                tx_hash=tx_hash(rng),
            ))
        return transfers

    def nft_count(self) -> int:
        return self.settings.NFT_COUNT

    def nft(self, index: int) -> Nft:
        rng = rng_for(self.seed, "nft", index)
        return Nft(
            id=str(index + 1),
            name=f"BAP NFT #{index + 1}",
            owner=address(rng),
            token_id=str(index + 1),
            contract=self.settings.NFT_CONTRACT,
            metadata=NftMetadata(description=rng.choice(NFT_DESCRIPTIONS)),
        )

    def contract(self, address_: str) -> Contract | None:
        rng = rng_for(self.seed, "contract", address_)
        if address_ == self.settings.NFT_CONTRACT.lower():
            contract_type, name = ContractType.NFT, "BAP NFT Contract"
        elif address_ == self.settings.TOKEN_CONTRACT.lower():
            contract_type, name = ContractType.TOKEN, "BAP Token Contract"
        elif address_ == self.settings.NFX_CONTRACT.lower():
            contract_type, name = ContractType.OTHER, "BAP NFX Contract"
        else:
            contract_type = rng.choice(list(ContractType))
            name = f"{contract_type.value} Contract"
        return Contract(
            id=hex_digits(rng, 8),
            address=address_,
            name=name,
            type=contract_type,
            verified=rng.random() > 0.2,
            deployed_at=self.tip_time - timedelta(days=rng.randint(1, 365)),
            transaction_count=rng.randint(10, 10000),
            creator=address(rng),
        )

    def contract_methods(self, contract: Contract) -> list[ContractMethod]:
        return list(CONTRACT_METHODS[contract.type])

    # ── Asset history ────────────────────────────────────────────────────────

    def asset_history(self, asset_id: str) -> list[EvolutionEvent] | None:
        """Chronological evolution events; always starts with a mint."""
        rng = rng_for(self.seed, "history", asset_id)
        count = rng.randint(2, 12)
        burned = count > 2 and rng.random() < 0.2
        timestamp = self.tip_time - timedelta(days=count * 2)
        owner = address(rng)
        events = [EvolutionEvent(
            id="1",
            asset_id=asset_id,
            event_type=EvolutionEventType.MINTED,
            to=owner,
            timestamp=timestamp,
            tx_hash=tx_hash(rng),
        )]
        level = 1
        for i in range(1, count):
            timestamp += timedelta(hours=rng.randint(1, 47))
            if burned and i == count - 1:
                event = EvolutionEvent(
                    id=str(i + 1), asset_id=asset_id, event_type=EvolutionEventType.BURNED,
                    from_=owner, timestamp=timestamp, tx_hash=tx_hash(rng),
                )
            elif rng.random() < 0.5:
                new_owner = address(rng)
                event = EvolutionEvent(
                    id=str(i + 1), asset_id=asset_id, event_type=EvolutionEventType.TRANSFERRED,
                    from_=owner, to=new_owner, timestamp=timestamp, tx_hash=tx_hash(rng),
                )
                owner = new_owner
            else:
                level += 1
                event = EvolutionEvent(
                    id=str(i + 1), asset_id=asset_id, event_type=EvolutionEventType.EVOLVED,
                    timestamp=timestamp, tx_hash=tx_hash(rng), metadata={"level": level},
                )
            events.append(event)
        return events

    # ── Metrics ──────────────────────────────────────────────────────────────

    def metrics(self) -> NetworkMetrics:
        pools = [self.pool(i) for i in range(self.pool_count())]
        return NetworkMetrics(
            block_height=self.current_height(),
            total_transactions=self.transaction_count(),
            active_validators=sum(p.validators for p in pools if p.status is PoolStatus.ACTIVE),
            network_hash_rate="1.2 TH/s",
            average_block_time=f"{BLOCK_INTERVAL.total_seconds():.1f}s",
            total_penalties=self.penalty_total(),
            network=self.settings.NETWORK,
        )
