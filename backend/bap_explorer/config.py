"""BAP Explorer — Application configuration via pydantic-settings."""
from datetime import datetime, timezone
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class Settings(BaseSettings):
    """Environment configuration. Read once at startup, never mutated."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # App
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5000"]

    # Network
    NETWORK: str = "testnet"
    API_URL: str = "http://localhost:5000"
    NFX_CONTRACT: str = ZERO_ADDRESS
    TOKEN_CONTRACT: str = ZERO_ADDRESS
    NFT_CONTRACT: str = ZERO_ADDRESS

    # Synthetic chain
    CHAIN_SEED: str = "bap-explorer"
    CHAIN_TIP_TIME: datetime = datetime(2025, 1, 1, tzinfo=timezone.utc)
    CURRENT_BLOCK_HEIGHT: int = 10000
    TRANSACTION_COUNT: int = 50000
    POOL_COUNT: int = 12
    NFX_COUNT: int = 50
    NFT_COUNT: int = 24
    PENALTY_TOTAL_ESTIMATE: int = 150
    PENALTY_SCAN_LIMIT: int = 100

    # Listing
    MAX_PAGE_LIMIT: int = 100

    # Client
    CLIENT_TIMEOUT_SECONDS: float = 10.0


@lru_cache
def get_settings() -> Settings:
    return Settings()
