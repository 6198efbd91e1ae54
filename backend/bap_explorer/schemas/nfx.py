"""BAP Explorer — NFX (Non-Fungible eXpanding island) schemas."""
from datetime import datetime

from bap_explorer.schemas.common import CamelModel


class Nfx(CamelModel):
    id: str
    name: str
    owner: str
    size: int
    reputation: int
    value: int
    branding: str
    premium: bool
    assets_count: int
    partners: int
    subspaces: int


class NfxStatistics(CamelModel):
    total_visits: int
    active_users: int
    daily_transactions: int
    average_value: int


class NfxGovernance(CamelModel):
    voting_power: int
    proposals: int
    decisions: tuple[str, ...]


class NfxEvent(CamelModel):
    id: str
    type: str
    description: str
    timestamp: datetime
    value: int | None = None


class DepositedAsset(CamelModel):
    id: str
    type: str
    name: str
    value: int


class NfxPartner(CamelModel):
    address: str
    name: str
    contribution: int


class NfxSubspace(CamelModel):
    id: str
    name: str
    size: int
    status: str


class NfxDetail(Nfx):
    """Full snapshot; nested collections are built together and never patched."""

    created_at: datetime
    last_activity: datetime
    description: str
    statistics: NfxStatistics
    governance: NfxGovernance
    events: tuple[NfxEvent, ...]
    deposited_assets: tuple[DepositedAsset, ...]
    partners_list: tuple[NfxPartner, ...]
    subspaces_list: tuple[NfxSubspace, ...]

    def summary(self) -> Nfx:
        return Nfx.model_validate(self.model_dump(include=set(Nfx.model_fields)))


class NfxList(CamelModel):
    nfx: list[Nfx]
    total: int


class NfxDetailResponse(CamelModel):
    nfx: NfxDetail
