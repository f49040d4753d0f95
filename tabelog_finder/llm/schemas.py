RESTAURANT_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "The name of the restaurant.",
        },
        "category": {
            "type": "string",
            "description": "The main category of food served (e.g., Ramen, Sushi, Italian).",
        },
        "rating": {
            "type": "number",
            "description": "The numerical rating from Tabelog.",
        },
        "source_url": {
            "type": "string",
            "description": "The direct URL to the restaurant's page on the English version of Tabelog.",
        },
        "address": {
            "type": "string",
            "description": "The full physical address of the restaurant.",
        },
        "map_url": {
            "type": "string",
            "description": "A Google Maps URL that points to the restaurant's address.",
        },
        "dish_image_url": {
            "type": "string",
            "description": (
                "A URL for an image of a featured or popular dish from the restaurant. "
                "Should be an empty string if no image is found."
            ),
        },
    },
    "required": ["name", "category", "rating", "source_url", "address", "map_url", "dish_image_url"],
    "additionalProperties": False,
}

RESTAURANT_SEARCH_SCHEMA = {
    "type": "object",
    "properties": {
        "restaurants": {
            "type": "array",
            "description": "A list of restaurants found.",
            "items": RESTAURANT_SCHEMA,
        },
    },
    "required": ["restaurants"],
    "additionalProperties": False,
}

RESTAURANT_SEARCH_RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "restaurant_search",
        "strict": True,
        "schema": RESTAURANT_SEARCH_SCHEMA,
    },
}
