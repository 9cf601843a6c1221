from fastapi import status


class RelayError(Exception):
    """Base class for errors that end a relay request with a JSON error body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    """The caller supplied a missing or blank URL."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "URL is required"):
        super().__init__(message)


class FetchError(RelayError):
    """The upstream page could not be fetched (network error or non-2xx)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(f"Failed to fetch content: {detail}")
        self.detail = detail


class ParseError(RelayError):
    """Fetched markup could not be parsed into a document tree."""
