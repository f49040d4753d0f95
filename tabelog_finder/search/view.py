from __future__ import annotations

from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import ClientConfig, Restaurant, RestaurantCard, SearchState, SearchView
from .state import has_more, visible_results


def to_card(restaurant: Restaurant, position: int) -> RestaurantCard:
    # source_url + position is only a best-effort key; Groq may repeat URLs
    return RestaurantCard(
        key=f"{restaurant.source_url}-{position}",
        name=restaurant.name,
        category=restaurant.category,
        rating=restaurant.rating,
        rating_label=f"{restaurant.rating:.2f}",
        source_url=restaurant.source_url,
        address=restaurant.address,
        map_url=restaurant.map_url,
        dish_image_url=restaurant.dish_image_url,
        has_image=bool(restaurant.dish_image_url.strip()),
    )


def build_view(state: SearchState, config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> SearchView:
    visible = visible_results(state)
    return SearchView(
        phase=state.phase,
        query_text=state.query_text,
        is_current_location=(
            state.query_text == config.current_location_label and state.coordinates is not None
        ),
        loading=state.loading,
        error=state.error,
        has_searched=state.has_searched,
        restaurants=[to_card(r, i) for i, r in enumerate(visible)],
        total_results=len(state.results),
        displayed_count=len(visible),
        has_more=has_more(state),
    )


def client_config(config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> ClientConfig:
    return ClientConfig(
        current_location_label=config.current_location_label,
        default_query=config.default_query,
        page_size=config.page_size,
        location_timeout_ms=config.location_timeout_ms,
    )
