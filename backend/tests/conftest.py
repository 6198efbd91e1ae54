import pytest
from fastapi.testclient import TestClient

from bap_explorer.config import Settings
from bap_explorer.main import create_app
from bap_explorer.sources.synthetic import SyntheticChain


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, CHAIN_SEED="test-seed", NETWORK="testnet")


@pytest.fixture
def chain(settings: Settings) -> SyntheticChain:
    return SyntheticChain(settings)


@pytest.fixture
def app(settings: Settings, chain: SyntheticChain):
    return create_app(settings, chain)


@pytest.fixture
def api(app) -> TestClient:
    return TestClient(app)
