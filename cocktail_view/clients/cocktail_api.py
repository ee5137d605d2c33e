# cocktail_view/clients/cocktail_api.py
from __future__ import annotations

from typing import Optional

import httpx
from pydantic import ValidationError

from cocktail_view.core import config
from cocktail_view.core.errors import FetchError
from cocktail_view.models.cocktail import Cocktail, CocktailEnvelope


class CocktailApiClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:5000",
        timeout_s: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    async def get_cocktail(self, cocktail_id: str) -> Cocktail:
        """
        One attempt, no retry. Anything other than a 2xx carrying
        {"message": {...cocktail...}} is reported as FetchError.
        """
        url = f"{self.base_url}/cocktail/{cocktail_id}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                r = await client.get(url)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPError as e:
            raise FetchError(f"GET {url} failed: {e}") from e
        except ValueError as e:
            raise FetchError(f"GET {url} returned invalid JSON: {e}") from e

        try:
            return CocktailEnvelope.model_validate(data).message
        except ValidationError as e:
            raise FetchError(f"GET {url} returned an unexpected payload: {e.error_count()} error(s)") from e


cocktails = CocktailApiClient(
    base_url=config.COCKTAIL_API_URL,
    timeout_s=config.COCKTAIL_API_TIMEOUT_S,
)
