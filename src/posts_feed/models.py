"""
Data Models

Value records decoded from the remote posts endpoint.
"""

from dataclasses import dataclass
from typing import Any, List

from .config import config


@dataclass(frozen=True)
class Post:
    """Represents a post from the API."""
    id: int
    title: str
    body: str

    @classmethod
    def from_dict(cls, item: Any) -> "Post":
        """
        Build a Post from one decoded JSON object.

        Keys other than ``id``, ``title`` and ``body`` are ignored.

        Args:
            item: A single element of the decoded JSON array.

        Returns:
            The corresponding Post.

        Raises:
            TypeError: If the element or one of its fields has the wrong type.
            KeyError: If a required field is missing.
        """
        if not isinstance(item, dict):
            raise TypeError(f"Expected a JSON object, got {type(item).__name__}")

        post_id = item["id"]
        title = item["title"]
        body = item["body"]

        # bool is an int subclass but never a valid id
        if not isinstance(post_id, int) or isinstance(post_id, bool):
            raise TypeError(f"Field 'id' must be an integer, got {post_id!r}")
        if not isinstance(title, str):
            raise TypeError(f"Field 'title' must be a string, got {title!r}")
        if not isinstance(body, str):
            raise TypeError(f"Field 'body' must be a string, got {body!r}")

        return cls(id=post_id, title=title, body=body)

    def format_content(self) -> str:
        """Format the post content for display."""
        return config.display.content_template.format(
            title=self.title,
            body=self.body
        )


PostCollection = List[Post]
