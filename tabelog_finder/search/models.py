from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


class Restaurant(BaseModel):
    # Strict and closed: the payload comes straight from the LLM
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    name: str
    category: str
    rating: float
    source_url: str
    address: str
    map_url: str
    dish_image_url: str


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class RestaurantSearchPayload(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    restaurants: list[Restaurant]


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------


class SearchPhase(str, Enum):
    idle = "idle"
    locating = "locating"
    searching = "searching"
    success = "success"
    empty = "empty"
    failed = "failed"


class SearchState(BaseModel):
    model_config = ConfigDict(frozen=True)

    query_text: str = ""
    coordinates: Coordinate | None = None
    results: tuple[Restaurant, ...] = ()
    display_count: int = 0
    loading: bool = False
    error: str | None = None
    has_searched: bool = False
    phase: SearchPhase = SearchPhase.idle
    request_token: int = 0


# ---------------------------------------------------------------------------
# Display / API models
# ---------------------------------------------------------------------------


class RestaurantCard(BaseModel):
    key: str
    name: str
    category: str
    rating: float
    rating_label: str
    source_url: str
    address: str
    map_url: str
    dish_image_url: str
    has_image: bool


class SearchView(BaseModel):
    phase: SearchPhase
    query_text: str
    is_current_location: bool
    loading: bool
    error: str | None = None
    has_searched: bool
    restaurants: list[RestaurantCard]
    total_results: int
    displayed_count: int
    has_more: bool


class QueryTextRequest(BaseModel):
    query_text: str = Field(..., max_length=500)


class SearchRequest(BaseModel):
    query_text: str | None = Field(default=None, max_length=500)


class LocationErrorCode(str, Enum):
    permission_denied = "permission_denied"
    timeout = "timeout"
    unavailable = "unavailable"
    unsupported = "unsupported"


class LocationReport(BaseModel):
    """What the browser's geolocation call produced: a position or an error code."""

    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)
    error: LocationErrorCode | None = None


class ClientConfig(BaseModel):
    current_location_label: str
    default_query: str
    page_size: int
    location_timeout_ms: int
