# cocktail_view/routers/home.py
from __future__ import annotations

from fastapi import APIRouter

from cocktail_view.core import config
from cocktail_view.services.health import version_payload

router = APIRouter(tags=["home"])


@router.get(config.HOME_PATH)
def home():
    # Where a detail page without an id sends the user
    return {
        "pages": {"cocktail": "/cocktail/{cocktail_id}", "sidebar": "/sidebar"},
        **version_payload(),
    }
