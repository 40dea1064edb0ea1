"""Result contract for fallible correlation operations.

A Result[T] is either Ok[T], holding the success value, or Err, holding
exactly one CorrelationError. There is no partial success.
"""

import functools
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    ClassVar,
    Generic,
    NoReturn,
    ParamSpec,
    TypeGuard,
    TypeVar,
    Union,
)

from fftcorr.errors import CorrelationError

T = TypeVar("T")
P = ParamSpec("P")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""
    value: T

    success: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the classified error."""
    error: CorrelationError

    success: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if not isinstance(self.error, CorrelationError):
            raise TypeError(
                f"Err requires a CorrelationError, not {type(self.error).__name__}"
            )

    def unwrap(self) -> NoReturn:
        """Raise the carried error unchanged."""
        raise self.error


Result = Union[Ok[T], Err]


def is_ok(result: "Result[T]") -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err(result: "Result[Any]") -> TypeGuard[Err]:
    return isinstance(result, Err)


def attempt(func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> "Result[T]":
    """Call func and capture a CorrelationError as Err.

    Any other exception propagates to the caller.
    """
    try:
        return Ok(func(*args, **kwargs))
    except CorrelationError as e:
        return Err(e)


def returns_result(func: Callable[P, T]) -> Callable[P, "Result[T]"]:
    """Decorate a raising function so it returns a Result instead."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> "Result[T]":
        return attempt(func, *args, **kwargs)

    return wrapper
