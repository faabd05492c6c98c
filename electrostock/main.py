import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from electrostock.api import advisory, items, reports, transactions
from electrostock.config import settings
from electrostock.database import SessionLocal, init_db
from electrostock.services.advisory_service import AdvisoryClient
from electrostock.services.inventory_service import InventoryService
from electrostock.services.state_store import SqlStateStore

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def create_app(inventory: InventoryService | None = None, advisory_client: AdvisoryClient | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        if getattr(app.state, "inventory", None) is None:
            init_db()
            app.state.inventory = InventoryService.load(SqlStateStore(SessionLocal))
        if getattr(app.state, "advisory", None) is None:
            app.state.advisory = AdvisoryClient()
        if not app.state.advisory.configured:
            logger.warning("GEMINI_API_KEY is not set; advisory endpoints will return fallback text")
        yield

    app = FastAPI(
        title="Electro Stock API",
        description="Electronics shop inventory: catalog, stock ledger, dashboard and AI insights",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.inventory = inventory
    app.state.advisory = advisory_client

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Return JSON for unhandled exceptions so the frontend can parse the error."""
        logger.error("Unhandled error: %s\n%s", exc, traceback.format_exc())
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    app.include_router(items.router, prefix="/api/v1")
    app.include_router(transactions.router, prefix="/api/v1")
    app.include_router(reports.router, prefix="/api/v1")
    app.include_router(advisory.router, prefix="/api/v1")

    @app.get("/api/v1/config")
    def get_config():
        """Expose public settings for the frontend."""
        return {
            "app_name": settings.APP_NAME,
            "low_stock_threshold": settings.LOW_STOCK_THRESHOLD,
            "advisory_enabled": bool(app.state.advisory and app.state.advisory.configured),
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
