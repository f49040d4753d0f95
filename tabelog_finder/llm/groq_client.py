from __future__ import annotations

import logging
from typing import Any

from groq import APIError, Groq
from pydantic import ValidationError

from ..search.errors import FetchError
from ..search.models import Coordinate, Restaurant, RestaurantSearchPayload
from .config import DEFAULT_LLM_CONFIG, LLMConfig
from .schemas import RESTAURANT_SEARCH_RESPONSE_FORMAT

logger = logging.getLogger(__name__)

SEARCH_SYSTEM_PROMPT = (
    "You are a restaurant search assistant for the Tabelog review site. "
    "Find real restaurants listed on Tabelog that match the request and "
    "return them as JSON matching the provided schema. "
    "Never invent restaurants, ratings or URLs."
)

COUNTRY_SYSTEM_PROMPT = (
    "You are a geography assistant. "
    "Answer with only the English name of the country, nothing else."
)


def _describe_location(location_text: str, coordinates: Coordinate | None) -> str:
    if coordinates is not None:
        return (
            f"near the coordinates latitude {coordinates.latitude} "
            f"and longitude {coordinates.longitude}"
        )
    return f'near the location: "{location_text}"'


def build_search_prompt(
    location_text: str,
    coordinates: Coordinate | None = None,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> str:
    lines = [
        f"Find top-rated restaurants on {config.review_site} "
        f"{_describe_location(location_text, coordinates)}.",
        f"Search for restaurants with a Tabelog rating of {config.min_rating} or higher.",
        f"Return up to {config.max_results} results if possible, sorted by rating in descending order.",
        "",
        "For each restaurant, provide the following details:",
        "1. Restaurant Name",
        "2. Category (e.g., Ramen, Sushi, Italian)",
        "3. Tabelog Rating as a number",
        "4. A direct URL to its English Tabelog page",
        "5. Its full address",
        "6. A Google Maps URL for the address.",
        "7. A URL for an image of a featured or popular dish. "
        "If no suitable image can be found, return an empty string.",
        "",
        "If no restaurants are found that meet the criteria, return an empty list.",
    ]
    return "\n".join(lines)


def build_country_prompt(coordinates: Coordinate) -> str:
    return (
        f"Which country contains latitude {coordinates.latitude} "
        f"and longitude {coordinates.longitude}?"
    )


def _complete(
    messages: list[dict[str, str]],
    config: LLMConfig,
    **options: Any,
) -> str:
    """Run one chat completion and return its text content.

    Raises FetchError when the API key is missing or Groq fails.
    """
    if not config.api_key:
        logger.error("GROQ_API_KEY is not set")
        raise FetchError()

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=messages,
            **options,
        )
    except APIError as exc:
        logger.warning("Groq request failed", exc_info=True)
        raise FetchError() from exc

    return response.choices[0].message.content or ""


def parse_restaurants(content: str) -> list[Restaurant]:
    """
    Validate a raw search payload.

    Anything that does not match the schema exactly, including an empty
    body, yields an empty list. Partially valid payloads are dropped whole.
    """
    if not content.strip():
        logger.error("Groq returned an empty response")
        return []

    try:
        payload = RestaurantSearchPayload.model_validate_json(content)
    except ValidationError:
        logger.warning("Discarding restaurant payload that does not match the schema", exc_info=True)
        return []

    return list(payload.restaurants)


def fetch_restaurants(
    location_text: str,
    coordinates: Coordinate | None = None,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> list[Restaurant]:
    """
    Ask Groq for restaurants near a location.

    Returns the restaurants in the order Groq listed them, or an empty list
    when the payload is missing or malformed. Raises FetchError on any
    transport or service failure; there is no retry and no caching.
    """
    logger.info("Searching restaurants near %r (coordinates=%s)", location_text, coordinates)
    content = _complete(
        [
            {"role": "system", "content": SEARCH_SYSTEM_PROMPT},
            {"role": "user", "content": build_search_prompt(location_text, coordinates, config)},
        ],
        config,
        max_tokens=config.max_tokens,
        temperature=0.2,
        response_format=RESTAURANT_SEARCH_RESPONSE_FORMAT,
    )
    restaurants = parse_restaurants(content)
    logger.info("Groq returned %d restaurants", len(restaurants))
    return restaurants


def classify_country(
    coordinates: Coordinate,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> str:
    """Return Groq's answer for the country containing *coordinates*, unnormalized."""
    return _complete(
        [
            {"role": "system", "content": COUNTRY_SYSTEM_PROMPT},
            {"role": "user", "content": build_country_prompt(coordinates)},
        ],
        config,
        max_tokens=512,
        temperature=0.0,
    )
