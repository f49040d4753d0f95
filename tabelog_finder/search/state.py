from __future__ import annotations

from collections.abc import Sequence

from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import Coordinate, Restaurant, SearchPhase, SearchState

# Every function here is a pure transition: it takes a state and returns a
# new one. Operations that await I/O carry the request_token they were
# started with; a completion whose token is no longer current is ignored.


def initial_state(config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> SearchState:
    return SearchState(query_text=config.default_query, display_count=config.page_size)


def is_current(state: SearchState, token: int) -> bool:
    return state.request_token == token


def edit_query(
    state: SearchState,
    query_text: str,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> SearchState:
    """Store new query text; coordinates only survive alongside the sentinel label."""
    coordinates = state.coordinates
    if query_text != config.current_location_label:
        coordinates = None
    return state.model_copy(update={"query_text": query_text, "coordinates": coordinates})


def start_search(
    state: SearchState,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> SearchState:
    return state.model_copy(update={
        "phase": SearchPhase.searching,
        "loading": True,
        "error": None,
        "has_searched": True,
        "results": (),
        "display_count": config.page_size,
        "request_token": state.request_token + 1,
    })


def start_locating(state: SearchState) -> SearchState:
    return state.model_copy(update={
        "phase": SearchPhase.locating,
        "loading": True,
        "error": None,
        "request_token": state.request_token + 1,
    })


def finish_search(
    state: SearchState,
    token: int,
    results: Sequence[Restaurant],
) -> SearchState:
    if not is_current(state, token):
        return state
    return state.model_copy(update={
        "phase": SearchPhase.success if results else SearchPhase.empty,
        "loading": False,
        "results": tuple(results),
    })


def fail(
    state: SearchState,
    message: str,
    token: int | None = None,
) -> SearchState:
    """
    Move to the failed phase with *message* as the only visible error.

    With a token, a stale failure is ignored. Without one the failure
    supersedes whatever is in flight.
    """
    if token is None:
        token = state.request_token + 1
    elif not is_current(state, token):
        return state
    return state.model_copy(update={
        "phase": SearchPhase.failed,
        "loading": False,
        "error": message,
        "request_token": token,
    })


def use_current_location(
    state: SearchState,
    token: int,
    coordinates: Coordinate,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> SearchState:
    if not is_current(state, token):
        return state
    return state.model_copy(update={
        "query_text": config.current_location_label,
        "coordinates": coordinates,
    })


def advance_page(
    state: SearchState,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> SearchState:
    return state.model_copy(update={"display_count": state.display_count + config.page_size})


def visible_results(state: SearchState) -> tuple[Restaurant, ...]:
    return state.results[: state.display_count]


def has_more(state: SearchState) -> bool:
    return len(state.results) > state.display_count
