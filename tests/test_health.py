from __future__ import annotations

import asyncio

import httpx

from cocktail_view.services import health


def test_cocktail_api_ok_on_any_non_5xx_answer():
    transport = httpx.MockTransport(lambda request: httpx.Response(404))

    out = asyncio.run(health.check_cocktail_api(transport=transport))

    assert out["status"] == "ok"
    assert "error" not in out


def test_cocktail_api_degraded_on_5xx():
    transport = httpx.MockTransport(lambda request: httpx.Response(503))

    out = asyncio.run(health.check_cocktail_api(transport=transport))

    assert out == {"status": "degraded", "latency_ms": out["latency_ms"], "error": "HTTP 503"}


def test_cocktail_api_degraded_when_unreachable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    out = asyncio.run(health.check_cocktail_api(transport=httpx.MockTransport(handler)))

    assert out["status"] == "degraded"
    assert "connection refused" in out["error"]
