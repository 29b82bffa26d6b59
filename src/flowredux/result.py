"""
Result type for effect outcomes and construction-time validation.

Recoverable failures (a side effect that raised, a registry built from an
unknown action kind, a config that does not validate) travel as values
instead of exceptions, so the dispatch pipeline never has to unwind through
a half-applied cycle.

Usage:
    >>> def parse_latency(raw: str) -> Result[float, str]:
    ...     try:
    ...         return Success(float(raw))
    ...     except ValueError:
    ...         return Failure(f"not a number: {raw!r}")
    ...
    >>> match parse_latency("1.5"):
    ...     case Success(value):
    ...         print(value)
    ...     case Failure(error):
    ...         print(error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value of type T."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error of type E."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        Raises:
            RuntimeError: Always; a Failure has no value.
        """
        raise RuntimeError(f"Called unwrap() on Failure: {self.error}")


Result = Success[T] | Failure[E]


def partition_results(
    results: list[Result[T, E]],
) -> tuple[list[T], list[E]]:
    """
    Split a batch of outcomes into values and errors, preserving order.

    Registry construction validates every registration this way and reports
    the first error.
    """
    successes: list[T] = [result.value for result in results if isinstance(result, Success)]
    failures: list[E] = [result.error for result in results if isinstance(result, Failure)]
    return (successes, failures)
