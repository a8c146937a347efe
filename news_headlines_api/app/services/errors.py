"""Errors raised by the headline store and rendered by the API layer."""


class HeadlineError(Exception):
    """Base class for errors reported to API clients.

    ``message`` is safe to return to the caller verbatim.
    """

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidHeadlineError(HeadlineError):
    """The request is missing a required field."""

    status_code = 400


class HeadlineNotFoundError(HeadlineError):
    """No headline matches the request."""

    status_code = 404
