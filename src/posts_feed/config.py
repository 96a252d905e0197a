"""
Configuration constants for the Posts Feed module.

This module centralizes all configurable parameters so the feed can be
pointed at a different endpoint (or a local stub) without code changes.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


def _default_base_url() -> str:
    return os.environ.get(
        "POSTS_FEED_BASE_URL",
        "https://jsonplaceholder.typicode.com"
    )


@dataclass
class APIConfig:
    """Remote endpoint settings."""
    base_url: str = field(default_factory=_default_base_url)
    posts_endpoint: str = "/posts"
    # None keeps the transport's own default timeout
    timeout_seconds: Optional[float] = None

    @property
    def posts_url(self) -> str:
        """Full URL of the posts endpoint."""
        return f"{self.base_url.rstrip('/')}{self.posts_endpoint}"


@dataclass
class DisplayConfig:
    """Console presentation settings."""
    content_template: str = "Title: {title}\n\n{body}"
    separator: str = "-" * 40


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "posts_feed.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
