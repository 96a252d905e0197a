"""
Outcome Module

Two-state result type shared by every layer of the feed: a fetch either
succeeds with a value or fails with exactly one error kind.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful completion carrying the fetched value."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed completion carrying a single error kind."""
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


Outcome = Union[Success[T], Failure[E]]
