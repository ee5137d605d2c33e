# cocktail_view/services/result_sidebar.py
from __future__ import annotations

from typing import Any, Callable, Dict

from cocktail_view.models.view import SidebarView

CALCULATING = -1


def format_result_count(num_of_results: int) -> str:
    if num_of_results == CALCULATING:
        return "Calculating..."
    return f"{num_of_results} cocktail{'' if num_of_results == 1 else 's'}"


class ResultSidebar:
    """
    Result count + search/filter controls. Holds nothing but the derived
    label; both controls submit through the parent's callback.
    """

    def __init__(self, num_of_results: int, on_submit: Callable[[Dict[str, Any]], Any]):
        self.on_submit = on_submit
        self._num_of_results = num_of_results
        self.label = format_result_count(num_of_results)

    @property
    def num_of_results(self) -> int:
        return self._num_of_results

    @num_of_results.setter
    def num_of_results(self, value: int) -> None:
        if value == self._num_of_results:
            return
        self._num_of_results = value
        self.label = format_result_count(value)

    def submit_search(self, criteria: Dict[str, Any]) -> Any:
        return self.on_submit(criteria)

    def submit_filters(self, criteria: Dict[str, Any]) -> Any:
        return self.on_submit(criteria)

    def render(self) -> SidebarView:
        return SidebarView(num_of_results=self.label)
