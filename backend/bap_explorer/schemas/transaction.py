"""BAP Explorer — Transaction schemas."""
from datetime import datetime
from enum import Enum

from pydantic import Field

from bap_explorer.schemas.common import CamelModel


class TransactionStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    PENDING = "pending"


class Transaction(CamelModel):
    hash: str
    from_: str = Field(alias="from")
    to: str
    value: str
    block_height: int
    timestamp: datetime
    status: TransactionStatus
    fee: str


class TransactionList(CamelModel):
    transactions: list[Transaction]
    total: int


class TransactionDetail(CamelModel):
    transaction: Transaction
