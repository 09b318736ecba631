from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Finance Robot API is running. Try /health"


@router.get("/health")
async def health():
    """Basic health check."""
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}
