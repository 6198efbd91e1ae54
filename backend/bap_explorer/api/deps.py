"""BAP Explorer — FastAPI dependencies (settings, chain source)."""
from fastapi import Request

from bap_explorer.config import Settings
from bap_explorer.sources.base import ChainSource


def get_app_settings(request: Request) -> Settings:
    """The Settings instance the app was created with."""
    return request.app.state.settings


def get_chain(request: Request) -> ChainSource:
    """Process-wide chain source built at startup."""
    return request.app.state.chain
