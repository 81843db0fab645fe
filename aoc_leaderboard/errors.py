from __future__ import annotations


class LeaderboardError(Exception):
    """Base class for everything this package raises."""


class TransportError(LeaderboardError):
    """The request never produced an HTTP response (DNS, connection, timeout)."""


class HTTPError(LeaderboardError):
    def __init__(self, status: int, message: str | None = None) -> None:
        self.status: int = status
        super().__init__(message or f"error connecting to Advent of Code, HTTP code {status}")


class AuthOrServerError(HTTPError):
    """Advent of Code answers 500 both for a bad session cookie and for real server errors."""

    def __init__(self, status: int = 500) -> None:
        super().__init__(status, "Advent of Code server error, wrong cookie perhaps?")


class DecodeError(LeaderboardError):
    """The body, or a field inside it, could not be decoded."""


class ConversionError(LeaderboardError):
    pass
