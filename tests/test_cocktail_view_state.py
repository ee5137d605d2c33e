from __future__ import annotations

import pytest

from cocktail_view.core.errors import NavigationError
from cocktail_view.models.cocktail import Cocktail
from cocktail_view.models.view import (
    Branch,
    FetchFailed,
    FetchSucceeded,
    ImageLoadFailed,
    NotificationDismissed,
    Phase,
    Theme,
    ThemeChanged,
    ViewState,
)
from cocktail_view.services import images
from cocktail_view.services.cocktail_view import derive_presentation, extract_cocktail_id, transition


def _cocktail(**overrides) -> Cocktail:
    data = {
        "name": "Negroni",
        "ingredients": [
            {"name": "Gin", "amount": "30 ml"},
            {"name": "Campari", "amount": "30 ml"},
            {"name": "Sweet vermouth", "amount": "30 ml"},
        ],
        "glassware": "Rocks",
        "method": "Stirred",
        "garnish": "Orange peel",
        "img_url": "https://img.example/negroni.jpg",
        "preparation": "Stir with ice and strain over a large cube.",
    }
    data.update(overrides)
    return Cocktail(**data)


def _loaded(theme: Theme = Theme.dark, **overrides) -> ViewState:
    return transition(ViewState(theme=theme), FetchSucceeded(cocktail=_cocktail(**overrides)))


def test_initial_state_is_loading_skeleton():
    state = ViewState(theme=Theme.dark)

    assert state.loading is True
    assert state.error is False
    assert state.phase is Phase.loading
    assert state.branch is Branch.skeleton


def test_success_with_ingredients_is_populated():
    state = _loaded()

    assert state.loading is False
    assert state.error is False
    assert state.phase is Phase.populated
    assert state.branch is Branch.populated
    assert state.notification_open is False


def test_success_with_no_ingredients_renders_not_found_without_error():
    state = _loaded(ingredients=[])

    assert state.loading is False
    assert state.error is False
    assert state.phase is Phase.empty
    assert state.branch is Branch.not_found
    assert state.notification_open is True


def test_failure_sets_error_and_not_found_branch():
    state = transition(ViewState(theme=Theme.dark), FetchFailed(reason="boom"))

    assert state.loading is False
    assert state.error is True
    assert state.phase is Phase.error
    assert state.branch is Branch.not_found


def test_settlement_happens_only_once():
    failed = transition(ViewState(theme=Theme.dark), FetchFailed())
    late = transition(failed, FetchSucceeded(cocktail=_cocktail()))

    assert late == failed
    assert late.branch is Branch.not_found

    populated = _loaded()
    assert transition(populated, FetchFailed()) == populated


def test_dismissing_notification_keeps_not_found_branch():
    state = transition(ViewState(theme=Theme.dark), FetchFailed())
    state = transition(state, NotificationDismissed())

    assert state.notification_open is False
    assert state.error is True
    assert state.branch is Branch.not_found


def test_dismissing_notification_on_empty_result_keeps_branch():
    state = transition(_loaded(ingredients=[]), NotificationDismissed())

    assert state.notification_open is False
    assert state.branch is Branch.not_found


def test_image_url_used_when_present():
    state = _loaded()

    assert state.presentation.image == "https://img.example/negroni.jpg"
    assert state.presentation.image_is_fallback is False


@pytest.mark.parametrize("img_url", [None, "", "   "])
def test_missing_image_url_uses_themed_fallback(img_url):
    dark = _loaded(Theme.dark, img_url=img_url)
    light = _loaded(Theme.light, img_url=img_url)

    assert dark.presentation.image == images.fallback_image(Theme.dark)
    assert light.presentation.image == images.fallback_image(Theme.light)
    assert dark.presentation.image_is_fallback is True


def test_image_load_failure_switches_to_fallback_without_error():
    state = transition(_loaded(Theme.light), ImageLoadFailed())

    assert state.presentation.image == images.fallback_image(Theme.light)
    assert state.presentation.image_is_fallback is True
    assert state.error is False
    assert state.branch is Branch.populated


def test_theme_change_rethemes_fallback_image():
    state = _loaded(Theme.dark, img_url=None)
    state = transition(state, ThemeChanged(theme=Theme.light))

    assert state.presentation.image == images.fallback_image(Theme.light)
    assert state.branch is Branch.populated


def test_theme_change_rethemes_fallback_after_image_failure():
    state = transition(_loaded(Theme.dark), ImageLoadFailed())
    state = transition(state, ThemeChanged(theme=Theme.light))

    assert state.presentation.image == images.fallback_image(Theme.light)


def test_theme_change_keeps_working_image_url():
    state = transition(_loaded(Theme.dark), ThemeChanged(theme=Theme.light))

    assert state.presentation.image == "https://img.example/negroni.jpg"


def test_invert_only_in_light_theme():
    light = _loaded(Theme.light)
    dark = _loaded(Theme.dark)

    assert light.presentation.invert is True
    assert light.presentation.style == {"filter": "invert(1)"}
    assert dark.presentation.invert is False
    assert dark.presentation.style == {}

    toggled = transition(dark, ThemeChanged(theme=Theme.light))
    assert toggled.presentation.invert is True
    assert toggled.invert is True


def test_theme_change_while_loading_keeps_phase():
    state = transition(ViewState(theme=Theme.dark), ThemeChanged(theme=Theme.light))

    assert state.phase is Phase.loading
    assert state.theme is Theme.light
    assert state.presentation is None


def test_derive_presentation_looks_up_glassware_and_method():
    p = derive_presentation(_cocktail(), Theme.dark)

    assert p.glassware_image == images.glassware_image("Rocks")
    assert p.method_image == images.method_image("Stirred")


def test_garnish_none_sentinel():
    assert _cocktail(garnish="None").garnish_label == "No garnish"
    assert _cocktail(garnish="Lime wheel").garnish_label == "Lime wheel"


@pytest.mark.parametrize(
    "path, expected",
    [("/cocktail/42", "42"), ("/cocktail/old-fashioned", "old-fashioned"), ("/cocktail/7?x=1", "7")],
)
def test_extract_cocktail_id(path, expected):
    assert extract_cocktail_id(path) == expected


@pytest.mark.parametrize("path", ["", "/", "/cocktail/"])
def test_extract_cocktail_id_missing(path):
    with pytest.raises(NavigationError):
        extract_cocktail_id(path)


def test_fallback_flag_follows_the_chosen_image():
    with_url = derive_presentation(_cocktail(), Theme.dark)
    without_url = derive_presentation(_cocktail(img_url=None), Theme.light)

    assert with_url.image_is_fallback is images.is_fallback_image(with_url.image) is False
    assert without_url.image_is_fallback is images.is_fallback_image(without_url.image) is True
