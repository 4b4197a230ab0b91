"""File Relay – FastAPI application entry-point."""

from contextlib import asynccontextmanager
import logging
from collections.abc import AsyncIterator

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from src.file_relay.config import settings
from src.file_relay.context import build_context
from src.file_relay.router import health, metadata, upload

# Configure logging from settings
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────
# Lifespan: build the storage context once on startup
# ──────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if getattr(app.state, "relay_context", None) is None:
        app.state.relay_context = build_context(settings)
    context = app.state.relay_context
    logger.info("🚀 Relaying uploads to bucket %s (%s)", context.bucket, context.region)
    yield
    logger.info("🛑 Shutting down.")


# ──────────────────────────────────────────────
# Application factory
# ──────────────────────────────────────────────
app = FastAPI(
    title="File Relay API",
    description="Upload documents, images and videos to S3 and get back a public URL.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS middleware (configured from environment variables) ──
app.add_middleware(
    middleware_class=CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_methods_list,
    allow_headers=settings.cors_headers_list,
)

logger.info("CORS configured with origins: %s", settings.cors_origins_list)

# ── register routers ──
app.include_router(health.router)
app.include_router(upload.router)
app.include_router(metadata.router)
