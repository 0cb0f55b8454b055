import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from polytools.config import Settings, configure_logging
from polytools.platforms.polymarket import PolymarketClient
from polytools.routes import tools
from polytools.tools.registry import build_registry

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, client: Optional[PolymarketClient] = None) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)
        poly_client = client
        if poly_client is None and settings.private_key:
            poly_client = PolymarketClient(settings)
        app.state.settings = settings
        app.state.registry = build_registry(settings, poly_client)
        yield
        if poly_client is not None:
            await poly_client.close()

    app = FastAPI(
        title="Polymarket Tools",
        description="Agent-callable Polymarket tools for market data, account state and order placement.",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.include_router(tools.router, prefix="/v1", tags=["Tools"])

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def run() -> None:
    import uvicorn

    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
