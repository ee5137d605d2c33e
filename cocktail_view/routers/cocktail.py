# cocktail_view/routers/cocktail.py
from __future__ import annotations

from typing import Optional, Union

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from cocktail_view.clients import cocktail_api
from cocktail_view.core import config
from cocktail_view.models.view import CocktailPage, Theme
from cocktail_view.services.cocktail_view import CocktailView

router = APIRouter(prefix="/cocktail", tags=["cocktail"])


async def _render(request: Request, theme: Optional[Theme], image_failed: bool) -> Union[CocktailPage, RedirectResponse]:
    view = CocktailView(client=cocktail_api.cocktails, theme=theme or Theme(config.DEFAULT_THEME))

    task = view.mount(request.url.path)
    if task is None:
        return RedirectResponse(view.navigator.location or config.HOME_PATH)
    await task

    # The browser reports a broken img_url by re-requesting with image_failed=true
    if image_failed:
        view.image_load_failed()

    return view.render()


@router.get("/", response_model=None)
async def cocktail_missing_id(request: Request):
    return await _render(request, None, False)


@router.get("/{cocktail_id}", response_model=CocktailPage)
async def cocktail_page(
    cocktail_id: str,
    request: Request,
    theme: Optional[Theme] = None,
    image_failed: bool = False,
):
    return await _render(request, theme, image_failed)
