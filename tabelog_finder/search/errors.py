from __future__ import annotations


class FinderError(Exception):
    """Base class for failures that end a search or a location lookup.

    ``message`` is shown to the user as-is.
    """

    default_message = "An unknown error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class QueryValidationError(FinderError):
    default_message = "Please enter a location."


class FetchError(FinderError):
    default_message = (
        "Failed to fetch restaurant data. "
        "Please check your API key and network connection."
    )


class GeolocationError(FinderError):
    default_message = (
        "Unable to retrieve your location. "
        "Please grant permission or enter a location manually."
    )


class LocationPermissionDenied(GeolocationError):
    default_message = (
        "Location permission was denied. "
        "Please allow location access or enter a location manually."
    )


class LocationTimeout(GeolocationError):
    default_message = (
        "Timed out while retrieving your location. "
        "Please try again or enter a location manually."
    )


class LocationUnavailable(GeolocationError):
    pass


class CountryMismatchError(FinderError):
    def __init__(self, expected_country: str, actual_country: str) -> None:
        self.expected_country = expected_country
        self.actual_country = actual_country
        super().__init__(
            f"Your current location appears to be outside {expected_country}. "
            f"Restaurant search only covers {expected_country}, "
            "so please enter a location there instead."
        )
