"""BAP Explorer — Network metrics schema."""
from bap_explorer.schemas.common import CamelModel


class NetworkMetrics(CamelModel):
    block_height: int
    total_transactions: int
    active_validators: int
    network_hash_rate: str
    average_block_time: str
    total_penalties: int
    network: str
