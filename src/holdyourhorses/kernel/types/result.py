"""Result[T, E] – the value handed to a completion callback.

Success and rejection travel through the same channel, so a caller only ever
inspects one object::

    def on_complete(result: Result[Payload, Exception]) -> None:
        match result:
            case Ok((body, response)):
                ...
            case Err(RateLimitedError() as exc):
                ...
"""

from __future__ import annotations

from typing import Any, Callable, Generic, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on {self!r}")

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self._value))

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("Ok", self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Error result variant."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self._error

    def map(self, func: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and other._error is self._error

    def __hash__(self) -> int:
        return hash(("Err", id(self._error)))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
