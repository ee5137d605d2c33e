# cocktail_view/models/view.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from cocktail_view.models.cocktail import Cocktail

NOTIFICATION_MESSAGE = "An error occurred while shaking up the ingredients."
EMPTY_VIEW_HEADING = "Cocktail not found"
EMPTY_VIEW_MESSAGE = "The ingredients seem to be missing"
EMPTY_VIEW_WIDTH = 300


class Theme(str, Enum):
    light = "light"
    dark = "dark"


class Phase(str, Enum):
    loading = "loading"
    error = "error"
    empty = "empty"
    populated = "populated"


class Branch(str, Enum):
    skeleton = "skeleton"
    not_found = "not_found"
    populated = "populated"


class Presentation(BaseModel):
    """Fields derived from (cocktail, theme, image_failed); never edited by hand."""

    image: str
    image_is_fallback: bool = False
    glassware_image: str
    method_image: str
    invert: bool = False

    @property
    def style(self) -> Dict[str, str]:
        return {"filter": "invert(1)"} if self.invert else {}


class ViewState(BaseModel):
    theme: Theme
    loading: bool = True
    error: bool = False
    cocktail: Optional[Cocktail] = None
    image_failed: bool = False
    notification_open: bool = False
    presentation: Optional[Presentation] = None

    @property
    def ingredient_count(self) -> int:
        return len(self.cocktail.ingredients) if self.cocktail else 0

    @property
    def phase(self) -> Phase:
        if self.loading:
            return Phase.loading
        if self.error:
            return Phase.error
        if self.ingredient_count == 0:
            return Phase.empty
        return Phase.populated

    @property
    def branch(self) -> Branch:
        phase = self.phase
        if phase is Phase.loading:
            return Branch.skeleton
        if phase is Phase.populated:
            return Branch.populated
        return Branch.not_found

    @property
    def invert(self) -> bool:
        return self.theme is Theme.light


# --- events fed into transition() ---

class FetchSucceeded(BaseModel):
    type: Literal["fetch_succeeded"] = "fetch_succeeded"
    cocktail: Cocktail


class FetchFailed(BaseModel):
    type: Literal["fetch_failed"] = "fetch_failed"
    reason: str = ""


class ThemeChanged(BaseModel):
    type: Literal["theme_changed"] = "theme_changed"
    theme: Theme


class ImageLoadFailed(BaseModel):
    type: Literal["image_load_failed"] = "image_load_failed"


class NotificationDismissed(BaseModel):
    type: Literal["notification_dismissed"] = "notification_dismissed"


ViewEvent = Union[FetchSucceeded, FetchFailed, ThemeChanged, ImageLoadFailed, NotificationDismissed]


# --- rendered page ---

class Header(BaseModel):
    has_sidebar: bool = False


class Notification(BaseModel):
    message: str = NOTIFICATION_MESSAGE
    open: bool = True


class EmptyView(BaseModel):
    width: int = EMPTY_VIEW_WIDTH
    heading: str = EMPTY_VIEW_HEADING
    message: str = EMPTY_VIEW_MESSAGE


class Detail(BaseModel):
    label: str
    image: str
    style: Dict[str, str] = Field(default_factory=dict)


class IngredientRow(BaseModel):
    name: str
    amount: str


class IngredientTable(BaseModel):
    headings: List[str] = Field(default_factory=lambda: ["Ingredients", "Amount"])
    rows: List[IngredientRow] = Field(default_factory=list)


class CocktailPage(BaseModel):
    branch: Branch
    header: Header = Field(default_factory=Header)
    document_title: Optional[str] = None
    failure: Optional[str] = None

    # not_found
    notification: Optional[Notification] = None
    empty_view: Optional[EmptyView] = None

    # populated
    title: Optional[str] = None
    image: Optional[str] = None
    method: Optional[Detail] = None
    glassware: Optional[Detail] = None
    garnish: Optional[str] = None
    preparation: Optional[str] = None
    ingredients: Optional[IngredientTable] = None


class SidebarView(BaseModel):
    heading: str = "Filter"
    num_of_results: str


class SidebarSubmitRequest(BaseModel):
    kind: Literal["search", "filters"] = "search"
    criteria: Dict[str, Any] = Field(default_factory=dict)
    callback_url: Optional[str] = None


class SidebarSubmitResponse(BaseModel):
    ok: bool = True
    forwarded: Dict[str, Any]
