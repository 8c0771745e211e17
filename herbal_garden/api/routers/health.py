# herbal_garden/api/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter

from herbal_garden.data.database import ping

router = APIRouter(tags=["health"])

COLLECTIONS = ["contacts", "products", "orders"]


@router.get("/health")
def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if ping() else "disconnected",
        "collections": COLLECTIONS,
    }
