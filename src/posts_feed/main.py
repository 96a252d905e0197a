"""
Main Entry Point

Console stand-in for the presentation layer. Runs the feed once:

1. Build the WebService -> Repository -> ViewModel stack
2. Fetch posts through the view model
3. Render the current posts, or log the failure and leave the list empty
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from typing import List, Optional, TextIO

from .config import config
from .factory import build_posts_view_model
from .models import Post
from .viewmodel import PostsViewModel


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger("posts_feed")
    logger.setLevel(logging.DEBUG)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


def render_posts(posts: List[Post], stream: TextIO) -> None:
    """Write each post's formatted content to ``stream``."""
    for post in posts:
        stream.write(config.display.separator + "\n")
        stream.write(post.format_content() + "\n")


async def show_feed(view_model: PostsViewModel, stream: Optional[TextIO] = None) -> bool:
    """
    Fetch and render the feed once.

    Args:
        view_model: View model to fetch through.
        stream: Where rendered posts are written (stdout if None).

    Returns:
        True if the fetch succeeded, False otherwise.
    """
    logger = logging.getLogger("posts_feed.main")
    if stream is None:
        stream = sys.stdout

    outcome = await view_model.fetch_posts()
    if outcome.is_failure:
        logger.error(
            f"Feed unavailable ({type(outcome.error).__name__}): "
            f"{outcome.error.description}"
        )
        return False

    render_posts(view_model.posts, stream)
    logger.info(f"Displayed {len(view_model.posts)} posts")
    return True


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="posts-feed",
        description="Fetch the posts feed once and print it."
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help=f"API base URL (default: {config.api.base_url})"
    )
    parser.add_argument(
        "--log-level",
        default=config.log.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the posts feed."""
    args = parse_args(argv)
    logger = setup_logging(args.log_level)

    api_config = config.api
    if args.base_url is not None:
        api_config = replace(api_config, base_url=args.base_url)

    try:
        view_model = build_posts_view_model(api_config=api_config)
        success = asyncio.run(show_feed(view_model))

        if success:
            sys.exit(0)
        else:
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
