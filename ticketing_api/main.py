import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ticketing_api.exceptions import register_exception_handlers
from ticketing_api.routers import events, reservations
from ticketing_api.store import load_catalog
from common.tracing import setup_telemetry # common 모듈 임포트

# 로거 설정
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CATALOG_FILE = os.getenv("CATALOG_FILE", "db.json")
TRACING_ENABLED = os.getenv("TRACING_ENABLED", "false").lower() == "true"

@asynccontextmanager
async def lifespan(app: FastAPI):
    # StartupDataError is left to propagate so the server refuses to start.
    app.state.store = load_catalog(CATALOG_FILE)
    logger.info("Ticketing service catalog ready.")
    yield
    logger.info("Ticketing service shut down gracefully.")

app = FastAPI(lifespan=lifespan)

if TRACING_ENABLED:
    logger.info("Setting up OpenTelemetry...")
    setup_telemetry(app)
    logger.info("OpenTelemetry setup complete.")

register_exception_handlers(app)
app.include_router(events.router)
app.include_router(reservations.router)

@app.get("/")
def health_check():
    return {"status": "ok", "message": "Ticketing service is running."}
