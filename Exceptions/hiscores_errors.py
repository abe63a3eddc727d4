class HiscoresError(Exception):
    """Base class for hiscores lookup errors."""
    pass


class PlayerNotFound(HiscoresError):
    """Raised when the hiscores service returns 404 for a player."""

    def __init__(self, player: str, url: str):
        super().__init__(f"Player not found: {player}")
        self.player = player
        self.url = url


class RequestFailed(HiscoresError):
    """Raised on connection errors, timeouts and unexpected status codes."""

    def __init__(self, message: str, url: str, cause=None, status_code=None):
        super().__init__(message)
        self.url = url
        self.cause = cause
        self.status_code = status_code


class DecodeFailed(HiscoresError):
    """Raised when a response body cannot be read as text."""

    def __init__(self, message: str, cause=None):
        super().__init__(message)
        self.cause = cause
