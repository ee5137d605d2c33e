# cocktail_view/services/health.py
from __future__ import annotations

import time
from typing import Any, Dict, Optional

import httpx

from cocktail_view.core import config


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check_result(status: str, latency_ms: int, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status, "latency_ms": latency_ms}
    if error:
        out["error"] = error
    return out


async def check_cocktail_api(transport: Optional[httpx.AsyncBaseTransport] = None) -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        # Any HTTP answer means the API is reachable; only transport errors count
        async with httpx.AsyncClient(timeout=2.0, transport=transport) as client:
            r = await client.get(f"{config.COCKTAIL_API_URL.rstrip('/')}/")
            if r.status_code >= 500:
                return _check_result("degraded", _ms_since(start), f"HTTP {r.status_code}")
        return _check_result("ok", _ms_since(start))
    except httpx.HTTPError as e:
        # degraded: detail pages will render the not-found branch
        return _check_result("degraded", _ms_since(start), str(e))


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
    }
