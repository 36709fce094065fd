"""Two-state result container.

A result holds exactly one payload: a success value (``Ok``) or a failure
value (``Error``). The two variants are the only concrete subclasses of the
abstract ``Result``, so the active state is the instance's class and can never
be "both" or "neither". Instances are frozen; there is no operation that flips
the state of an existing result.

Example:
    res = parse(text)
    res.if_ok(store).if_error(log.warning)
    match res:
        case Ok(value):
            ...
        case Error(reason):
            ...
"""

from __future__ import annotations

import abc
import copy
import dataclasses
import typing

from twofold._callbacks import invoke, resolve_arity
from twofold.config import get_config
from twofold.errors import InvalidStateError
from twofold.unit import Unit, is_unit

if typing.TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Self

__all__ = ["Error", "Ok", "Result"]

# Distinguishes ``is_ok()`` from ``is_ok(value)``; UNIT is a valid argument.
_ABSENT: typing.Final = object()


class Result[OkT, ErrT](abc.ABC):
    """Either a success (``Ok``) or a failure (``Error``).

    ``Result`` is abstract; build results with ``Ok(value)``/``Error(value)``
    or the equivalent ``Result.ok``/``Result.error`` factories.
    """

    __slots__ = ()

    # --- Construction -------------------------------------------------------

    @staticmethod
    def ok[T](value: T) -> Ok[T]:
        """Construct a success result carrying *value*."""
        return Ok(value)

    @staticmethod
    def error[E](value: E) -> Error[E]:
        """Construct a failure result carrying *value*."""
        return Error(value)

    @classmethod
    def from_result(
        cls, other: Result[OkT, Unit] | Result[Unit, ErrT]
    ) -> Result[OkT, ErrT]:
        """Convert a single-purpose result, copying its payload.

        The payload is copied according to ``Config.copy_mode`` so the new
        result never shares it with *other*. Called on ``Ok`` or ``Error``
        directly, *other* must be in that same state.

        Raises:
            TypeError: *other* is not a result.
            InvalidStateError: *other* is in the state opposite to ``cls``.
        """
        if not isinstance(other, Result):
            raise TypeError(
                f"from_result() expects a Result, got {type(other).__name__}"
            )
        if cls in (Ok, Error) and not isinstance(other, cls):
            raise InvalidStateError(
                f"Cannot convert {_state(other)} result into {cls.__name__}",
                hint=f"Use Result.from_result() to keep the {_state(other)} state.",
                expected=_state_of_class(cls),
                actual=_state(other),
            )

        duplicate = (
            copy.deepcopy if get_config().copy_mode == "deep" else copy.copy
        )
        if isinstance(other, Ok):
            return Ok(duplicate(other.value))
        return Error(duplicate(other.value))

    # --- Predicates ---------------------------------------------------------

    @abc.abstractmethod
    def is_ok(self, value: object = _ABSENT) -> bool:
        """Return True for a success result.

        With *value*, also require the payload to compare equal to it. A
        unit payload or a unit *value* never matches.
        """

    @abc.abstractmethod
    def is_error(self, value: object = _ABSENT) -> bool:
        """Return True for a failure result, optionally matching *value*."""

    def __bool__(self) -> bool:
        return self.is_ok()

    # --- Extraction ---------------------------------------------------------

    @abc.abstractmethod
    def unwrap(self) -> OkT:
        """Return the success payload.

        Raises:
            InvalidStateError: the result is a failure.
        """

    @abc.abstractmethod
    def unwrap_error(self) -> ErrT:
        """Return the failure payload.

        Raises:
            InvalidStateError: the result is a success.
        """

    @abc.abstractmethod
    def unwrap_or(self, default: OkT) -> OkT:
        """Return the success payload, or *default* for a failure."""

    # --- Conditional execution ----------------------------------------------

    @abc.abstractmethod
    def if_ok(self, callback: Callable[..., object]) -> Self:
        """Call *callback* when successful and return this same result.

        *callback* is called with no arguments if it accepts none, otherwise
        with the payload. Its exceptions propagate to the caller.
        """

    @abc.abstractmethod
    def if_error(self, callback: Callable[..., object]) -> Self:
        """Call *callback* on failure and return this same result."""


@typing.final
@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T](Result[T, Unit]):
    """A successful result carrying ``value``."""

    value: T

    def is_ok(self, value: object = _ABSENT) -> bool:
        return value is _ABSENT or _matches(self.value, value)

    def is_error(self, value: object = _ABSENT) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> typing.NoReturn:
        raise InvalidStateError(
            "unwrap_error() called on an ok result",
            hint="Check is_error() before unwrapping the error.",
            expected="error",
            actual="ok",
        )

    def unwrap_or(self, default: T) -> T:
        return self.value

    def if_ok(self, callback: Callable[..., object]) -> Self:
        invoke(callback, self.value)
        return self

    def if_error(self, callback: Callable[..., object]) -> Self:
        resolve_arity(callback)
        return self


@typing.final
@dataclasses.dataclass(frozen=True, slots=True)
class Error[E](Result[Unit, E]):
    """A failed result carrying ``value``."""

    value: E

    def is_ok(self, value: object = _ABSENT) -> bool:
        return False

    def is_error(self, value: object = _ABSENT) -> bool:
        return value is _ABSENT or _matches(self.value, value)

    def unwrap(self) -> typing.NoReturn:
        raise InvalidStateError(
            "unwrap() called on an error result",
            hint="Check is_ok() first or use unwrap_or().",
            expected="ok",
            actual="error",
        )

    def unwrap_error(self) -> E:
        return self.value

    def unwrap_or[D](self, default: D) -> D:
        return default

    def if_ok(self, callback: Callable[..., object]) -> Self:
        resolve_arity(callback)
        return self

    def if_error(self, callback: Callable[..., object]) -> Self:
        invoke(callback, self.value)
        return self


def _matches(payload: object, value: object) -> bool:
    if is_unit(payload) or is_unit(value):
        return False
    return bool(payload == value)


def _state(result: Result[typing.Any, typing.Any]) -> str:
    return "ok" if result.is_ok() else "error"


def _state_of_class(cls: type) -> str:
    return "ok" if cls is Ok else "error"
