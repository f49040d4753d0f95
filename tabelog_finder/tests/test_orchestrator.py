from __future__ import annotations

from unittest.mock import patch

from tabelog_finder.search.config import SearchConfig
from tabelog_finder.search.errors import FetchError, LocationPermissionDenied, LocationTimeout
from tabelog_finder.search.geolocation import reported_locator
from tabelog_finder.search.models import (
    Coordinate,
    LocationErrorCode,
    LocationReport,
    Restaurant,
    SearchPhase,
)
from tabelog_finder.search.orchestrator import SearchOrchestrator

TOKYO = Coordinate(latitude=35.6812, longitude=139.7671)
PARIS = Coordinate(latitude=48.8566, longitude=2.3522)
SENTINEL = SearchConfig().current_location_label


def _restaurant(rating: float, name: str = "Kikunoi") -> Restaurant:
    return Restaurant(
        name=name,
        category="Kaiseki",
        rating=rating,
        source_url=f"https://tabelog.com/en/kyoto/{name}/",
        address="Higashiyama-ku, Kyoto",
        map_url="https://maps.google.com/?q=Kyoto",
        dish_image_url="",
    )


def _locator(coordinates: Coordinate):
    return reported_locator(LocationReport(latitude=coordinates.latitude, longitude=coordinates.longitude))


# ── trigger_search ───────────────────────────────────────────────────────


@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_blank_query_fails_without_network_call(mock_fetch):
    search = SearchOrchestrator()
    state = search.trigger_search("   ")

    assert state.phase == SearchPhase.failed
    assert state.error == "Please enter a location."
    assert not state.loading
    mock_fetch.assert_not_called()


@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_search_applies_tiering(mock_fetch):
    mock_fetch.return_value = [_restaurant(3.9, "b"), _restaurant(4.2, "a"), _restaurant(3.4, "c")]
    search = SearchOrchestrator()

    state = search.trigger_search("Kyoto Station")

    assert state.phase == SearchPhase.success
    assert [r.rating for r in state.results] == [4.2]
    assert state.has_searched
    assert not state.loading
    mock_fetch.assert_called_once_with("Kyoto Station", None, search.llm_config)


@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_search_uses_stored_query_text(mock_fetch):
    mock_fetch.return_value = []
    search = SearchOrchestrator()

    search.trigger_search()

    assert mock_fetch.call_args.args[0] == "Tokyo Station"


@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_empty_results_are_not_an_error(mock_fetch):
    mock_fetch.return_value = [_restaurant(3.0)]
    search = SearchOrchestrator()

    state = search.trigger_search("Nowhere")

    assert state.phase == SearchPhase.empty
    assert state.error is None
    assert state.results == ()


@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_fetch_error_fails_with_message(mock_fetch):
    mock_fetch.side_effect = FetchError()
    search = SearchOrchestrator()

    state = search.trigger_search("Osaka")

    assert state.phase == SearchPhase.failed
    assert state.error == FetchError().message
    assert not state.loading


@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_new_search_clears_previous_error(mock_fetch):
    search = SearchOrchestrator()
    search.trigger_search("")
    mock_fetch.return_value = [_restaurant(4.1)]

    state = search.trigger_search("Osaka")

    assert state.error is None
    assert state.phase == SearchPhase.success


@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_stale_search_result_is_discarded(mock_fetch):
    search = SearchOrchestrator()
    fresh = [_restaurant(4.5, "fresh")]

    def slow_then_superseded(location_text, coordinates, config):
        if location_text == "Old query":
            # A newer search starts and finishes while this one is in flight
            mock_fetch.side_effect = lambda *args: fresh
            search.trigger_search("New query")
            return [_restaurant(4.9, "stale")]
        return fresh

    mock_fetch.side_effect = slow_then_superseded

    state = search.trigger_search("Old query")

    assert [r.name for r in state.results] == ["fresh"]
    assert state.query_text == "New query"
    assert [r.name for r in search.state.results] == ["fresh"]


# ── Coordinates ──────────────────────────────────────────────────────────


@patch("tabelog_finder.search.orchestrator.classify_country", return_value="Japan")
@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_coordinates_only_sent_with_sentinel(mock_fetch, mock_country):
    mock_fetch.return_value = [_restaurant(4.0)]
    search = SearchOrchestrator()
    search.request_location_lookup(_locator(TOKYO))
    assert mock_fetch.call_args.args[:2] == (SENTINEL, TOKYO)

    search.set_query_text("Ueno")
    search.set_query_text(SENTINEL)
    search.trigger_search()
    assert mock_fetch.call_args.args[:2] == (SENTINEL, None)


# ── request_location_lookup ──────────────────────────────────────────────


@patch("tabelog_finder.search.orchestrator.classify_country", return_value=" japan \n")
@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_location_lookup_searches_after_country_check(mock_fetch, mock_country):
    mock_fetch.return_value = [_restaurant(4.3)]
    search = SearchOrchestrator()

    state = search.request_location_lookup(_locator(TOKYO))

    assert state.phase == SearchPhase.success
    assert state.query_text == SENTINEL
    assert state.coordinates == TOKYO
    mock_country.assert_called_once_with(TOKYO, search.llm_config)


@patch("tabelog_finder.search.orchestrator.classify_country", return_value="France")
@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_country_mismatch_blocks_search(mock_fetch, mock_country):
    search = SearchOrchestrator()

    state = search.request_location_lookup(_locator(PARIS))

    assert state.phase == SearchPhase.failed
    assert "outside Japan" in state.error
    assert state.query_text == "Tokyo Station"
    assert state.coordinates is None
    mock_fetch.assert_not_called()


@patch("tabelog_finder.search.orchestrator.classify_country")
@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_country_check_can_be_disabled(mock_fetch, mock_country):
    mock_fetch.return_value = []
    search = SearchOrchestrator(config=SearchConfig(expected_country=""))

    state = search.request_location_lookup(_locator(PARIS))

    assert state.phase == SearchPhase.empty
    mock_country.assert_not_called()


@patch("tabelog_finder.search.orchestrator.classify_country", side_effect=FetchError())
@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_country_check_failure(mock_fetch, mock_country):
    search = SearchOrchestrator()

    state = search.request_location_lookup(_locator(TOKYO))

    assert state.phase == SearchPhase.failed
    assert state.error == FetchError().message
    mock_fetch.assert_not_called()


@patch("tabelog_finder.search.orchestrator.fetch_restaurants")
def test_geolocation_errors_have_distinct_messages(mock_fetch):
    messages = set()
    for code in LocationErrorCode:
        search = SearchOrchestrator()
        state = search.request_location_lookup(reported_locator(LocationReport(error=code)))
        assert state.phase == SearchPhase.failed
        assert not state.loading
        messages.add(state.error)

    assert len(messages) == len(LocationErrorCode)
    assert LocationPermissionDenied().message in messages
    assert LocationTimeout().message in messages
    mock_fetch.assert_not_called()


def test_locator_receives_timeout_in_seconds():
    seen = []

    def locator(timeout):
        seen.append(timeout)
        raise LocationTimeout()

    SearchOrchestrator().request_location_lookup(locator)

    assert seen == [10.0]


# ── advance_page ─────────────────────────────────────────────────────────


def test_advance_page_grows_by_page_size():
    search = SearchOrchestrator()
    assert search.advance_page().display_count == 18
    assert search.advance_page().display_count == 27
