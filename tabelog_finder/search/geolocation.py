from __future__ import annotations

from collections.abc import Callable

from .errors import (
    GeolocationError,
    LocationPermissionDenied,
    LocationTimeout,
    LocationUnavailable,
)
from .models import Coordinate, LocationErrorCode, LocationReport

# A locator resolves the device position within the given timeout (seconds),
# raising a GeolocationError subclass when it cannot.
Locator = Callable[[float], Coordinate]

UNSUPPORTED_MESSAGE = "Geolocation is not supported by your browser."

_ERRORS: dict[LocationErrorCode, Callable[[], GeolocationError]] = {
    LocationErrorCode.permission_denied: LocationPermissionDenied,
    LocationErrorCode.timeout: LocationTimeout,
    LocationErrorCode.unavailable: LocationUnavailable,
    LocationErrorCode.unsupported: lambda: LocationUnavailable(UNSUPPORTED_MESSAGE),
}


def error_for_code(code: LocationErrorCode) -> GeolocationError:
    return _ERRORS[code]()


def reported_locator(report: LocationReport) -> Locator:
    """
    Build a locator from what the browser already resolved.

    The browser enforces the timeout itself, so the returned locator
    ignores it and only replays the outcome.
    """

    def locate(timeout: float) -> Coordinate:
        if report.error is not None:
            raise error_for_code(report.error)
        if report.latitude is None or report.longitude is None:
            raise LocationUnavailable()
        return Coordinate(latitude=report.latitude, longitude=report.longitude)

    return locate
