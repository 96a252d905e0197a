"""
Domain Errors

Closed set of error kinds the repository and view model report, independent
of the HTTP client's own exception types.
"""

from dataclasses import dataclass


class FeedError:
    """Base for domain-level feed errors."""

    @property
    def description(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class NoData(FeedError):
    """Transport succeeded but returned no payload."""

    @property
    def description(self) -> str:
        return "no data"


@dataclass(frozen=True)
class Timeout(FeedError):
    """The underlying call timed out."""
    message: str

    @property
    def description(self) -> str:
        return self.message


@dataclass(frozen=True)
class NoInternetConnection(FeedError):
    """Connectivity-class transport failure."""
    message: str

    @property
    def description(self) -> str:
        return self.message


@dataclass(frozen=True)
class Serialization(FeedError):
    """Payload could not be decoded into the expected shape."""
    message: str

    @property
    def description(self) -> str:
        return self.message


@dataclass(frozen=True)
class Unexpected(FeedError):
    """Any web service failure without a more specific kind."""
    message: str

    @property
    def description(self) -> str:
        return self.message
