# cocktail_view/services/images.py
from __future__ import annotations

import re
from typing import Optional

from cocktail_view.core import config
from cocktail_view.models.view import Theme

FALLBACK_PREFIX = "no-cocktail-"

GLASSWARE = {
    "highball",
    "rocks",
    "old-fashioned",
    "shot",
    "martini",
    "cocktail",
    "hurricane",
    "margarita",
    "coupe",
    "collins",
    "flute",
    "irish-coffee",
    "wine",
    "nick-and-nora",
    "snifter",
    "tiki",
    "sling",
    "copper-mug",
}

METHODS = {
    "shaken",
    "stirred",
    "built",
    "blended",
    "muddled",
    "layered",
    "thrown",
}

DEFAULT_GLASSWARE = "default"
DEFAULT_METHOD = "default"


def _slug(name: Optional[str]) -> str:
    s = (name or "").strip().lower().replace("&", " and ")
    return re.sub(r"[^a-z0-9]+", "-", s).strip("-")


def _image(kind: str, slug: str) -> str:
    return f"{config.IMAGES_URL}/{kind}/{slug}.png"


def glassware_image(name: Optional[str]) -> str:
    # "Rocks glass" and "Rocks" share artwork
    slug = _slug(name)
    if slug.endswith("-glass"):
        slug = slug[: -len("-glass")]
    return _image("glassware", slug if slug in GLASSWARE else DEFAULT_GLASSWARE)


def method_image(name: Optional[str]) -> str:
    slug = _slug(name)
    return _image("method", slug if slug in METHODS else DEFAULT_METHOD)


def fallback_image(theme: Theme) -> str:
    return f"{config.IMAGES_URL}/{FALLBACK_PREFIX}{Theme(theme).value}.png"


def is_fallback_image(ref: Optional[str]) -> bool:
    return FALLBACK_PREFIX in (ref or "")
