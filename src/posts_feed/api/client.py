"""
API Client Module

Asynchronous web service for fetching posts from a JSONPlaceholder-style
endpoint. Issues exactly one GET per call and reports a single Outcome:
the decoded posts, or one raw failure kind. Failures are never retried.
"""

import logging
from typing import List, Optional

import httpx

from ..config import APIConfig, config
from ..models import Post
from ..outcome import Failure, Outcome, Success
from .errors import (
    BadStatus,
    Decode,
    InvalidURL,
    NoData,
    Transport,
    WebServiceError,
)


logger = logging.getLogger(__name__)


class PostsWebService:
    """
    HTTP client for the posts endpoint.

    The endpoint comes from the injected APIConfig, and the httpx transport
    can be swapped (e.g. for ``httpx.MockTransport``) so the service can be
    exercised against a local stub.
    """

    def __init__(
        self,
        api_config: Optional[APIConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the web service.

        Args:
            api_config: Endpoint settings (uses the global config if None).
            transport: httpx transport to send requests through (default
                network transport if None).
        """
        self.api_config = api_config or config.api
        self.transport = transport
        logger.info(f"PostsWebService initialized (url: {self.api_config.posts_url})")

    async def fetch_posts(self) -> Outcome[List[Post], WebServiceError]:
        """
        Fetch posts from the API.

        Returns:
            Success with the posts in server order, or Failure with one of
            InvalidURL, Transport, BadStatus, NoData or Decode.
        """
        raw_url = self.api_config.posts_url
        url = self._build_url(raw_url)
        if url is None:
            logger.error(f"Cannot build request URL from {raw_url!r}")
            return Failure(InvalidURL(raw_url))

        logger.info(f"Fetching posts from {url}")

        try:
            async with self._create_client() as client:
                response = await client.get(url)
        except httpx.DecodingError as e:
            logger.warning(f"Posts payload could not be decoded: {e!r}")
            return Failure(Decode(e))
        except httpx.RequestError as e:
            logger.warning(f"Transport error fetching posts: {e!r}")
            return Failure(Transport(e, timed_out=isinstance(e, httpx.TimeoutException)))

        if not response.is_success:
            logger.warning(f"Posts endpoint answered HTTP {response.status_code}")
            return Failure(BadStatus(response.status_code))

        return self._decode_posts(response)

    def _build_url(self, raw_url: str) -> Optional[httpx.URL]:
        """
        Parse and validate the endpoint URL.

        Returns:
            The parsed URL, or None if it is not an absolute http(s) URL.
        """
        try:
            url = httpx.URL(raw_url)
        except (httpx.InvalidURL, TypeError) as e:
            logger.debug(f"URL parsing failed: {e}")
            return None

        if url.scheme not in ("http", "https") or not url.host:
            return None

        return url

    def _create_client(self) -> httpx.AsyncClient:
        kwargs = {"transport": self.transport}
        if self.api_config.timeout_seconds is not None:
            kwargs["timeout"] = self.api_config.timeout_seconds
        return httpx.AsyncClient(**kwargs)

    def _decode_posts(self, response: httpx.Response) -> Outcome[List[Post], WebServiceError]:
        """
        Decode a response body into posts.

        An empty body or a JSON ``null`` counts as no data; anything else
        that is not an array of post objects is a decode failure.
        """
        if not response.content.strip():
            logger.warning("Posts endpoint returned an empty body")
            return Failure(NoData())

        try:
            data = response.json()
        except (ValueError, RecursionError) as e:
            logger.warning(f"Posts payload is not valid JSON: {e}")
            return Failure(Decode(e))

        if data is None:
            logger.warning("Posts endpoint returned null")
            return Failure(NoData())

        if not isinstance(data, list):
            error = TypeError(f"Expected a JSON array, got {type(data).__name__}")
            logger.warning(f"Unexpected API response format: {error}")
            return Failure(Decode(error))

        try:
            posts = [Post.from_dict(item) for item in data]
        except (KeyError, TypeError) as e:
            logger.warning(f"Failed to decode post: {e!r}")
            return Failure(Decode(e))

        logger.info(f"Fetched {len(posts)} posts successfully")
        return Success(posts)
