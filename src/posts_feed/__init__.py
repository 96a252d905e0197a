"""
Posts Feed

Feature module that fetches a list of posts from a remote endpoint and
exposes them to a presentation layer through a view model.
"""

from .factory import build_posts_view_model
from .models import Post
from .outcome import Failure, Outcome, Success
from .repository import PostsRepository
from .viewmodel import PostsViewModel

__all__ = [
    "build_posts_view_model",
    "Post",
    "Outcome",
    "Success",
    "Failure",
    "PostsRepository",
    "PostsViewModel",
]
