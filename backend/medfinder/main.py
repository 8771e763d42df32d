"""
MedFinder Backend.

ARCHITECTURE:
- Search: public, read-only. Ranks nearby pharmacies holding a medicine.
- Owner endpoints: registration and inventory edits (auth lives in front of
  this service).
- SQL database: registered pharmacies and the global inventory. Seed
  pharmacies ship with the code.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medfinder.api.routes import inventory, pharmacies, search
from medfinder.core.config import settings
from medfinder.core.rate_limiter import RateLimitMiddleware
from medfinder.db.init_db import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup."""
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized")
    yield


app = FastAPI(
    title="MedFinder API",
    description="Find in-stock medicines at nearby pharmacies.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin"],
    max_age=600,
)

app.add_middleware(RateLimitMiddleware)

app.include_router(search.router, prefix="/search", tags=["search"])
app.include_router(pharmacies.router, prefix="/pharmacies", tags=["pharmacies"])
app.include_router(inventory.router, prefix="/inventory", tags=["inventory"])


@app.get("/health")
def health():
    return {"status": "ok"}
