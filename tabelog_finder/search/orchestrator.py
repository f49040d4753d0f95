from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import classify_country, fetch_restaurants
from . import state as transitions
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .errors import CountryMismatchError, FetchError, GeolocationError, QueryValidationError
from .geolocation import Locator
from .models import Coordinate, SearchState
from .ranking import select_tier

logger = logging.getLogger(__name__)


def _normalize_country(name: str) -> str:
    return name.strip().casefold()


class SearchOrchestrator:
    """
    Owns one session's SearchState and drives the query service.

    State changes go through the pure functions in ``state``; the lock only
    guards swapping in the new state and is never held while Groq or the
    locator is working.
    """

    def __init__(
        self,
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
    ) -> None:
        self.config = config
        self.llm_config = llm_config
        self._state = transitions.initial_state(config)
        self._lock = threading.Lock()

    @property
    def state(self) -> SearchState:
        return self._state

    def _apply(self, transition: Callable[..., SearchState], *args) -> SearchState:
        with self._lock:
            self._state = transition(self._state, *args)
            return self._state

    # ── Query text ───────────────────────────────────────────────────────

    def set_query_text(self, query_text: str) -> SearchState:
        return self._apply(transitions.edit_query, query_text, self.config)

    # ── Search ───────────────────────────────────────────────────────────

    def trigger_search(self, query_text: str | None = None) -> SearchState:
        if query_text is not None:
            self.set_query_text(query_text)

        current = self._state
        if not current.query_text.strip():
            return self._apply(transitions.fail, QueryValidationError().message)

        started = self._apply(transitions.start_search, self.config)
        token = started.request_token
        coordinates = None
        if started.query_text == self.config.current_location_label:
            coordinates = started.coordinates

        start_time = time.time()
        try:
            candidates = fetch_restaurants(started.query_text, coordinates, self.llm_config)
        except FetchError as exc:
            return self._apply(transitions.fail, exc.message, token)

        results = select_tier(candidates, self.config.rating_tiers)
        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        logger.info(
            "Search %d for %r: %d candidates, %d after tiering (%.1f ms)",
            token, started.query_text, len(candidates), len(results), elapsed_ms,
        )

        finished = self._apply(transitions.finish_search, token, results)
        if not transitions.is_current(finished, token):
            logger.debug("Discarding stale result of search %d", token)
        return finished

    # ── Location ─────────────────────────────────────────────────────────

    def _verify_country(self, coordinates: Coordinate) -> None:
        expected = self.config.expected_country
        if not expected:
            return
        actual = classify_country(coordinates, self.llm_config)
        if _normalize_country(actual) != _normalize_country(expected):
            logger.info("Rejecting location %s: in %r, expected %r", coordinates, actual, expected)
            raise CountryMismatchError(expected, actual.strip())

    def request_location_lookup(self, locator: Locator) -> SearchState:
        """
        Resolve the device position, check its country, then search there.

        Any failure ends in the failed phase without running a search.
        """
        token = self._apply(transitions.start_locating).request_token
        try:
            coordinates = locator(self.config.location_timeout_ms / 1000)
            self._verify_country(coordinates)
        except (GeolocationError, CountryMismatchError, FetchError) as exc:
            return self._apply(transitions.fail, exc.message, token)

        located = self._apply(transitions.use_current_location, token, coordinates, self.config)
        if not transitions.is_current(located, token):
            logger.debug("Discarding stale location lookup %d", token)
            return located
        return self.trigger_search()

    # ── Pagination ───────────────────────────────────────────────────────

    def advance_page(self) -> SearchState:
        return self._apply(transitions.advance_page, self.config)
