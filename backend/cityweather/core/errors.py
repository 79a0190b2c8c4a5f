from enum import Enum

class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    NETWORK = "network"


class WeatherAppError(Exception):
    """Base for every failure surfaced to the presentation layer."""
    kind: ErrorKind
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WeatherAppError):
    """The city field was empty (raised by the boundary, never by services)."""
    kind = ErrorKind.VALIDATION
    status_code = 400


class NotFoundError(WeatherAppError):
    """Geocoding succeeded but matched nothing."""
    kind = ErrorKind.NOT_FOUND
    status_code = 404


class NetworkError(WeatherAppError):
    """An upstream request failed, returned a non-success status, or sent an unreadable body."""
    kind = ErrorKind.NETWORK
    status_code = 502
