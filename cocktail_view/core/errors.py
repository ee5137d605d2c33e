# cocktail_view/core/errors.py
from __future__ import annotations


class CocktailViewError(Exception):
    kind = "error"


class NavigationError(CocktailViewError):
    """The current location carries no cocktail id; the view sends the user home."""

    kind = "navigation"


class FetchError(CocktailViewError):
    """Network failure, non-2xx status or a payload that isn't the expected envelope."""

    kind = "fetch"


class EmptyResultError(CocktailViewError):
    """The API answered, but the cocktail has no ingredients."""

    kind = "empty"
