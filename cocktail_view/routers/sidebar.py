# cocktail_view/routers/sidebar.py
from __future__ import annotations

from typing import Any, Dict

import httpx
from fastapi import APIRouter, HTTPException

from cocktail_view.core import config
from cocktail_view.models.view import SidebarSubmitRequest, SidebarSubmitResponse, SidebarView
from cocktail_view.services.result_sidebar import CALCULATING, ResultSidebar

router = APIRouter(prefix="/sidebar", tags=["sidebar"])


def callback_allowed(callback_url: str) -> bool:
    try:
        url = httpx.URL(callback_url)
    except httpx.InvalidURL:
        return False
    return url.scheme in ("http", "https") and url.host.lower() in config.CALLBACK_HOSTS


async def post_to_callback(callback_url: str, payload: Dict[str, Any]) -> None:
    # The parent list page owns the search; if it can't be reached, say so.
    # Redirects are not followed: the target host must stay on the allow-list.
    async with httpx.AsyncClient(timeout=15, follow_redirects=False) as client:
        resp = await client.post(callback_url, json=payload)
        resp.raise_for_status()


@router.get("", response_model=SidebarView)
def sidebar(num_of_results: int = CALCULATING) -> SidebarView:
    if num_of_results < CALCULATING:
        raise HTTPException(status_code=400, detail="num_of_results must be -1 or a count")
    return ResultSidebar(num_of_results, on_submit=lambda criteria: criteria).render()


@router.post("/submit", response_model=SidebarSubmitResponse)
async def sidebar_submit(req: SidebarSubmitRequest) -> SidebarSubmitResponse:
    if req.callback_url and not callback_allowed(req.callback_url):
        raise HTTPException(status_code=400, detail="callback_url host is not allowed")

    forwarded: list[Dict[str, Any]] = []
    side = ResultSidebar(CALCULATING, on_submit=forwarded.append)

    if req.kind == "search":
        side.submit_search(req.criteria)
    else:
        side.submit_filters(req.criteria)

    if req.callback_url:
        try:
            await post_to_callback(req.callback_url, forwarded[0])
        except httpx.HTTPError as e:
            raise HTTPException(status_code=502, detail=f"Parent callback failed: {e}")

    return SidebarSubmitResponse(forwarded=forwarded[0])
