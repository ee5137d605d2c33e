# cocktail_view/models/cocktail.py
from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel

NO_GARNISH = "None"


class Ingredient(BaseModel):
    name: str
    amount: str


class Cocktail(BaseModel):
    name: str
    # img_url is the only optional field
    ingredients: List[Ingredient]
    glassware: str
    method: str
    garnish: str
    img_url: Optional[str] = None
    preparation: str

    @property
    def garnish_label(self) -> str:
        # The API spells "no garnish" as the literal string "None"
        return "No garnish" if self.garnish == NO_GARNISH else self.garnish


class CocktailEnvelope(BaseModel):
    # GET /cocktail/{id} -> {"message": {...}}
    message: Cocktail
