# cocktail_view/routers/health.py
from __future__ import annotations

from fastapi import APIRouter

from cocktail_view.services import health as health_service

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: if the process is serving requests, it's up
    return {"status": "ok", **health_service.version_payload()}


@router.get("/health/ready")
async def ready():
    api = await health_service.check_cocktail_api()

    # The upstream API is never fatal: pages fall back to the not-found view
    overall = "ok" if api["status"] == "ok" else "degraded"

    return {
        "status": overall,
        "checks": {"cocktail_api": api},
        **health_service.version_payload(),
    }


@router.get("/version")
def version():
    return health_service.version_payload()
