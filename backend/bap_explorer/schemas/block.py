"""BAP Explorer — Block schemas."""
from datetime import datetime

from bap_explorer.schemas.common import CamelModel


class Block(CamelModel):
    height: int
    hash: str
    timestamp: datetime
    transactions: int
    validator: str
    size: int


class BlockList(CamelModel):
    blocks: list[Block]
    total: int


class BlockDetail(CamelModel):
    block: Block
