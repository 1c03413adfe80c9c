"""Custom exceptions for Yahoo Transit route search."""


class TransitSearchError(Exception):
    """Base exception for transit search errors."""

    pass


class NetworkError(TransitSearchError):
    """Raised when fetching or reading the result page fails."""

    pass


class ValidationError(TransitSearchError):
    """Raised when search arguments cannot be turned into a request."""

    pass
