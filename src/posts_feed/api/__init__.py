"""
API Client Module

Provides the asynchronous web service for fetching posts.
"""

from .client import PostsWebService
from .errors import (
    BadStatus,
    Decode,
    InvalidURL,
    NoData,
    Transport,
    WebServiceError,
)

__all__ = [
    "PostsWebService",
    "WebServiceError",
    "InvalidURL",
    "Transport",
    "NoData",
    "Decode",
    "BadStatus",
]
