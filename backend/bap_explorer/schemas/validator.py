"""BAP Explorer — Validation pool and penalty schemas."""
from datetime import datetime
from enum import Enum

from bap_explorer.schemas.common import CamelModel


class PoolStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class PenaltyType(str, Enum):
    SLASH = "slash"
    JAIL = "jail"
    DOWNTIME = "downtime"


class ValidationPool(CamelModel):
    id: str
    name: str
    total_stake: str
    validators: int
    commission: str
    status: PoolStatus
    performance: int


class PoolList(CamelModel):
    pools: list[ValidationPool]
    total: int


class Penalty(CamelModel):
    id: str
    validator: str
    type: PenaltyType
    reason: str
    amount: str
    block_height: int
    timestamp: datetime


class PenaltyList(CamelModel):
    penalties: list[Penalty]
    total: int
