import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "tripwise.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from app.routers import destinations, links, search, trips

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables if the DB is empty (dev/MVP convenience)
    try:
        from app.database import create_tables
        await create_tables()
    except Exception as e:
        logger.warning(f"Table creation skipped: {e}")

    yield

    # Shutdown
    from app.services.flight_search_service import flight_search_service
    from app.services.hotel_search_service import hotel_search_service
    from app.services.trip_service import trip_service
    await flight_search_service.close()
    await hotel_search_service.close()
    await trip_service.close()


app = FastAPI(
    title="TripWise",
    description="Travel planning: itineraries, budget split, flight and hotel search",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trips.router, prefix="/api/trips", tags=["trips"])
app.include_router(search.router, prefix="/api/search", tags=["search"])
app.include_router(links.router, prefix="/api", tags=["links"])
app.include_router(destinations.router, prefix="/api/destinations", tags=["destinations"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "tripwise"}
