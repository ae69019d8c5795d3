"""FastAPI application entry point."""

import os
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cli.logging_config import setup_logging
from web.deps import get_config, get_db_path
from web.routes import dashboard, entries

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    setup_logging(json_mode=True, level=config.logging.level)
    logger.info(
        "web.startup",
        db_path=str(get_db_path()),
        week_start=config.dashboard.week_start,
        bucketing_timezone=config.dashboard.bucketing_timezone or "local",
    )
    yield
    logger.info("web.shutdown")


app = FastAPI(
    title="Moodboard",
    version="0.1.0",
    lifespan=lifespan,
)

# Comma-separated list of browser origins allowed to call the API
frontend_origins = [
    o.strip() for o in os.getenv("FRONTEND_ORIGIN", "http://localhost:3000").split(",") if o.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=frontend_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(entries.router)
app.include_router(dashboard.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
