"""Error types raised by the tracker and their HTTP mapping."""


class TrackerError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingField(TrackerError):
    """A required input is absent or empty."""

    status_code = 400


class InvalidNumber(TrackerError):
    """Duration could not be read as a finite number."""

    status_code = 400


class NotFound(TrackerError):
    """The referenced user does not exist."""

    status_code = 404


class StoreFailure(TrackerError):
    """The document store failed; details stay in the server log."""

    status_code = 500

    def __init__(self, message: str = "server error"):
        super().__init__("server error")
        self.detail = message
