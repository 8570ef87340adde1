"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Callers match
on the variant and handle both tracks explicitly.

Usage:
    result = await registry.refresh_connections()
    match result:
        case Success(value=snapshot):
            print(f"{len(snapshot)} connections")
        case Failure(error=error):
            print(f"Refresh failed: {error.message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error value describing the failure.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
