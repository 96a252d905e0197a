"""
Feed Factory

Builds a fully wired WebService -> Repository -> ViewModel stack.
"""

from typing import Optional

import httpx

from .api.client import PostsWebService
from .config import APIConfig
from .repository import PostsRepository
from .viewmodel import PostsViewModel


def build_posts_view_model(
    api_config: Optional[APIConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    web_service: Optional[PostsWebService] = None,
    repository: Optional[PostsRepository] = None
) -> PostsViewModel:
    """
    Construct a view model with default collaborators.

    Any collaborator may be overridden; an explicit ``repository`` takes
    precedence over ``web_service``, which takes precedence over
    ``api_config``/``transport``.

    Args:
        api_config: Endpoint settings (global config if None).
        transport: httpx transport for the web service.
        web_service: Pre-built web service.
        repository: Pre-built repository.

    Returns:
        A new PostsViewModel.
    """
    if repository is None:
        if web_service is None:
            web_service = PostsWebService(api_config=api_config, transport=transport)
        repository = PostsRepository(web_service)
    return PostsViewModel(repository)
