"""
Posts Repository

Delegates to the web service and translates its raw failures into the
domain error taxonomy. Adds no failure modes of its own.
"""

import logging
from typing import List

from .api import errors as web
from .api.client import PostsWebService
from .errors import (
    FeedError,
    NoData,
    NoInternetConnection,
    Serialization,
    Timeout,
    Unexpected,
)
from .models import Post
from .outcome import Failure, Outcome


logger = logging.getLogger(__name__)


def map_web_service_error(error: web.WebServiceError) -> FeedError:
    """
    Map a raw web service failure onto exactly one domain error.

    Args:
        error: Failure reported by the web service.

    Returns:
        The matching domain error; Unexpected for kinds with no specific
        counterpart.
    """
    if isinstance(error, web.InvalidURL):
        return NoInternetConnection(error.description)
    if isinstance(error, web.Transport):
        if error.timed_out:
            return Timeout(error.description)
        return NoInternetConnection(error.description)
    if isinstance(error, web.NoData):
        return NoData()
    if isinstance(error, web.Decode):
        return Serialization(error.description)
    return Unexpected(error.description)


class PostsRepository:
    """
    Repository exposing posts with domain-level errors.
    """

    def __init__(self, web_service: PostsWebService):
        """
        Initialize the repository.

        Args:
            web_service: The web service used to fetch posts.
        """
        self.web_service = web_service
        logger.info("PostsRepository initialized")

    async def fetch_posts(self) -> Outcome[List[Post], FeedError]:
        """
        Fetch posts through the web service.

        Returns:
            The web service's Success unchanged, or a Failure carrying the
            mapped domain error.
        """
        outcome = await self.web_service.fetch_posts()

        if outcome.is_success:
            return outcome

        domain_error = map_web_service_error(outcome.error)
        logger.info(
            f"Mapped {type(outcome.error).__name__} to "
            f"{type(domain_error).__name__}: {domain_error.description}"
        )
        return Failure(domain_error)
