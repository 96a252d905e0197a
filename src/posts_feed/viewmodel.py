"""
Posts View Model

Owns the fetched posts and exposes them to the presentation layer through
a single asynchronous fetch operation.

The view model keeps no in-flight guard: if ``fetch_posts`` is called again
before an earlier call completes, both run to completion and the last one to
succeed determines ``posts``. All state writes happen on the event loop the
fetch was awaited on.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from .errors import FeedError
from .models import Post
from .outcome import Outcome
from .repository import PostsRepository


logger = logging.getLogger(__name__)


FetchCallback = Callable[[Outcome[List[Post], FeedError]], None]


class PostsViewModel:
    """
    View model holding the most recently fetched posts.
    """

    def __init__(self, repository: PostsRepository):
        """
        Initialize the view model.

        Args:
            repository: Repository used to fetch posts.
        """
        self.repository = repository
        self._posts: List[Post] = []
        self._has_fetched = False
        logger.info("PostsViewModel initialized")

    @property
    def posts(self) -> List[Post]:
        """Posts from the last successful fetch (empty before the first)."""
        return list(self._posts)

    @property
    def has_fetched(self) -> bool:
        """Whether at least one fetch has succeeded."""
        return self._has_fetched

    async def fetch_posts(self) -> Outcome[List[Post], FeedError]:
        """
        Fetch posts and update state on success.

        A failed fetch leaves any previously fetched posts in place.

        Returns:
            The repository's outcome, unchanged.
        """
        outcome = await self.repository.fetch_posts()

        if outcome.is_success:
            self._posts = list(outcome.value)
            self._has_fetched = True
            logger.info(f"Feed updated with {len(self._posts)} posts")
        else:
            logger.error(f"Failed to fetch posts: {outcome.error.description}")

        return outcome

    def start_fetch(self, on_complete: Optional[FetchCallback] = None) -> "asyncio.Task":
        """
        Schedule a fetch on the running event loop.

        Must be called from within a running loop. ``on_complete`` is invoked
        exactly once, on that loop, with the fetch outcome.

        Args:
            on_complete: Callback receiving the outcome.

        Returns:
            The scheduled task.
        """
        task = asyncio.get_running_loop().create_task(self.fetch_posts())

        if on_complete is not None:
            def _deliver(finished: "asyncio.Task") -> None:
                if finished.cancelled():
                    return
                on_complete(finished.result())

            task.add_done_callback(_deliver)

        return task
