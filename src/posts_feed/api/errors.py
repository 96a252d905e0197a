"""
Web Service Errors

Raw failure kinds reported by the posts web service, before the
repository translates them into the domain taxonomy.
"""

from dataclasses import dataclass


class WebServiceError:
    """Base for raw web service failures."""

    @property
    def description(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class InvalidURL(WebServiceError):
    """The endpoint URL could not be constructed; no request was sent."""
    url: str

    @property
    def description(self) -> str:
        return f"invalid URL: {self.url!r}"


@dataclass(frozen=True)
class Transport(WebServiceError):
    """The underlying HTTP client failed to complete the request."""
    error: Exception
    timed_out: bool = False

    @property
    def description(self) -> str:
        return str(self.error) or type(self.error).__name__


@dataclass(frozen=True)
class NoData(WebServiceError):
    """The request succeeded but the response carried no payload."""

    @property
    def description(self) -> str:
        return "response contained no data"


@dataclass(frozen=True)
class Decode(WebServiceError):
    """The payload could not be decoded into a list of posts."""
    error: Exception

    @property
    def description(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


@dataclass(frozen=True)
class BadStatus(WebServiceError):
    """The server answered with a non-success HTTP status."""
    status_code: int

    @property
    def description(self) -> str:
        return f"unexpected HTTP status {self.status_code}"
