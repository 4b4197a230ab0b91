"""Router – root and health check."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Cannot GET /"


@router.get("/health")
def health_check() -> dict:
    """Liveness / readiness probe."""
    return {"status": "ok"}
