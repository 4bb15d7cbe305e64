# growth-tracker/growth_tracker/main.py
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from growth_tracker.api.v1.api import api_router
from growth_tracker.core.config import settings
from growth_tracker.core.exceptions import GrowthTrackerError
from growth_tracker.core.logging import configure_logging, get_logger
from growth_tracker.db import session
from growth_tracker.db.models import Base

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=session.engine)
    logger.info("Growth Tracker API starting up")
    yield
    logger.info("Growth Tracker API shutting down")


app = FastAPI(title="Growth Tracker API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info("%s %s -> %s (%.2f ms)", request.method, request.url.path, response.status_code, duration_ms)
    return response


@app.exception_handler(GrowthTrackerError)
async def domain_error_handler(request: Request, exc: GrowthTrackerError):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# All resource routes live under /api/v1
app.include_router(api_router, prefix="/api/v1")


@app.get("/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


def main():
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run(
        "growth_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )


if __name__ == "__main__":
    main()
