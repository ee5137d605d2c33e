# cocktail_view/services/cocktail_view.py
"""
Detail view for a single cocktail.

The view is a small state machine:

    LOADING --FetchSucceeded(ingredients)--> POPULATED
    LOADING --FetchSucceeded([])-----------> EMPTY
    LOADING --FetchFailed------------------> ERROR

POPULATED / EMPTY / ERROR are terminal for a mount. ThemeChanged and
ImageLoadFailed only re-derive the presentation fields, they never move
the phase. `transition` and `derive_presentation` are pure; `CocktailView`
wires them to the API client, the navigator and the document title.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from cocktail_view.core import config
from cocktail_view.core.errors import EmptyResultError, FetchError, NavigationError
from cocktail_view.models.cocktail import Cocktail
from cocktail_view.models.view import (
    Branch,
    CocktailPage,
    Detail,
    EmptyView,
    FetchFailed,
    FetchSucceeded,
    ImageLoadFailed,
    IngredientRow,
    IngredientTable,
    Notification,
    NotificationDismissed,
    Phase,
    Presentation,
    Theme,
    ThemeChanged,
    ViewEvent,
    ViewState,
)
from cocktail_view.services import images

log = logging.getLogger(__name__)


def extract_cocktail_id(pathname: str) -> str:
    cocktail_id = (pathname or "").split("?", 1)[0].split("/")[-1].strip()
    if not cocktail_id:
        raise NavigationError(f"No cocktail id in path {pathname!r}")
    return cocktail_id


def derive_presentation(cocktail: Cocktail, theme: Theme, image_failed: bool = False) -> Presentation:
    """
    Missing img_url and a broken img_url both land on the themed placeholder.
    """
    theme = Theme(theme)
    img_url = (cocktail.img_url or "").strip()
    use_url = bool(img_url) and not image_failed

    image = img_url if use_url else images.fallback_image(theme)

    return Presentation(
        image=image,
        image_is_fallback=images.is_fallback_image(image),
        glassware_image=images.glassware_image(cocktail.glassware),
        method_image=images.method_image(cocktail.method),
        # glassware / method / placeholder artwork is drawn for dark backgrounds
        invert=theme is Theme.light,
    )


def _rederive(state: ViewState, **update: Any) -> ViewState:
    state = state.model_copy(update=update)
    if state.cocktail is None:
        return state
    presentation = derive_presentation(state.cocktail, state.theme, state.image_failed)
    return state.model_copy(update={"presentation": presentation})


def transition(state: ViewState, event: ViewEvent) -> ViewState:
    if isinstance(event, (FetchSucceeded, FetchFailed)) and not state.loading:
        # loading flips to False exactly once per mount
        log.debug("ignoring %s, view already settled as %s", event.type, state.phase.value)
        return state

    if isinstance(event, FetchSucceeded):
        return _rederive(
            state,
            loading=False,
            cocktail=event.cocktail,
            notification_open=not event.cocktail.ingredients,
        )

    if isinstance(event, FetchFailed):
        return state.model_copy(update={"loading": False, "error": True, "notification_open": True})

    if isinstance(event, ThemeChanged):
        return _rederive(state, theme=Theme(event.theme))

    if isinstance(event, ImageLoadFailed):
        return _rederive(state, image_failed=True)

    if isinstance(event, NotificationDismissed):
        return state.model_copy(update={"notification_open": False})

    raise TypeError(f"Unknown view event: {event!r}")


class Navigator:
    def __init__(self) -> None:
        self.location: Optional[str] = None

    def redirect(self, path: str) -> None:
        self.location = path


class Document:
    def __init__(self, title: str = "") -> None:
        self.title = title


class CocktailView:
    def __init__(
        self,
        client: Any,
        theme: Theme = Theme.dark,
        navigator: Optional[Navigator] = None,
        document: Optional[Document] = None,
    ):
        self.client = client
        self.navigator = navigator or Navigator()
        self.document = document or Document()
        self.state = ViewState(theme=Theme(theme))
        self.unmounted = False
        self._task: Optional[asyncio.Task] = None

    def dispatch(self, event: ViewEvent) -> ViewState:
        if self.unmounted:
            log.debug("view unmounted, dropping %s", event.type)
            return self.state
        self.state = transition(self.state, event)
        return self.state

    def mount(self, pathname: str) -> Optional[asyncio.Task]:
        """
        Start the single fetch for this mount. Must be called from a running
        event loop. Returns None when the path has no id (redirected home).
        """
        if self._task is not None:
            return self._task

        try:
            cocktail_id = extract_cocktail_id(pathname)
        except NavigationError as e:
            log.info("redirecting home: %s", e)
            self.navigator.redirect(config.HOME_PATH)
            return None

        self._task = asyncio.get_running_loop().create_task(self.load(cocktail_id))
        return self._task

    def unmount(self) -> None:
        # The in-flight fetch is left to finish; it just can't write state anymore.
        self.unmounted = True

    async def load(self, cocktail_id: str) -> ViewState:
        log.info("fetching cocktail %s", cocktail_id)
        try:
            cocktail = await self.client.get_cocktail(cocktail_id)
        except FetchError as e:
            log.warning("cocktail %s: %s", cocktail_id, e)
            return self.dispatch(FetchFailed(reason=str(e)))

        if self.unmounted:
            log.debug("cocktail %s arrived after unmount", cocktail_id)
            return self.state

        self.document.title = cocktail.name
        if not cocktail.ingredients:
            log.warning("cocktail %s: %s", cocktail_id, EmptyResultError(f"{cocktail.name!r} has no ingredients"))
        return self.dispatch(FetchSucceeded(cocktail=cocktail))

    def set_theme(self, theme: Theme) -> ViewState:
        return self.dispatch(ThemeChanged(theme=theme))

    def image_load_failed(self) -> ViewState:
        return self.dispatch(ImageLoadFailed())

    def dismiss_notification(self) -> ViewState:
        return self.dispatch(NotificationDismissed())

    def render(self) -> CocktailPage:
        state = self.state
        branch = state.branch
        page = CocktailPage(branch=branch, document_title=self.document.title or None)

        if branch is Branch.skeleton:
            return page

        if branch is Branch.not_found:
            page.failure = FetchError.kind if state.phase is Phase.error else EmptyResultError.kind
            page.notification = Notification(open=state.notification_open)
            page.empty_view = EmptyView()
            return page

        cocktail = state.cocktail
        presentation = state.presentation
        page.title = cocktail.name
        page.image = presentation.image
        page.method = Detail(label=cocktail.method, image=presentation.method_image, style=presentation.style)
        page.glassware = Detail(label=cocktail.glassware, image=presentation.glassware_image, style=presentation.style)
        page.garnish = cocktail.garnish_label
        page.preparation = cocktail.preparation
        page.ingredients = IngredientTable(
            rows=[IngredientRow(name=i.name, amount=i.amount) for i in cocktail.ingredients]
        )
        return page
