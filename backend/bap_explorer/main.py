"""
BAP Explorer — FastAPI ASGI Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bap_explorer.api.v1.router import api_router
from bap_explorer.config import Settings, get_settings
from bap_explorer.core.logging import configure_logging
from bap_explorer.core.responses import register_exception_handlers
from bap_explorer.sources.base import ChainSource
from bap_explorer.sources.synthetic import SyntheticChain

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup/shutdown logging."""
    settings: Settings = app.state.settings
    logger.info("BAP Explorer starting (network=%s, environment=%s)", settings.NETWORK, settings.ENVIRONMENT)
    yield
    logger.info("BAP Explorer stopped")


def create_app(settings: Settings | None = None, chain: ChainSource | None = None) -> FastAPI:
    """Build the app. Settings and chain source are fixed for the app's lifetime."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="BAP Explorer",
        description="Block And Play chain explorer API",
        version="0.1.0",
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.chain = chain or SyntheticChain(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        """Health check for load balancers and Docker."""
        return {"status": "ok", "service": "bap-explorer", "network": settings.NETWORK}

    return app


app = create_app()
