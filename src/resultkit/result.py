"""Result type for explicit error handling.

Provides a Result[T, E] type with Ok and Err variants. A failure is an ordinary
value: it passes through map/and_then untouched until something inspects it.
Only unwrap() and expect() turn an Err back into a raised exception.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return err(f"not a number: {raw}")
        return ok(int(raw))

    port = parse_port(raw).map(lambda p: p + 1).unwrap_or(8080)

    match parse_port(raw):
        case Ok(data):
            serve(data)
        case Err(error):
            log.warning("bad port: %s", error)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Never, final

from resultkit.exceptions import UnwrapError
from resultkit.render import render_error

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def _unwrap_error(prefix: str, error: object) -> UnwrapError:
    message = f"{prefix}: {render_error(error)}"
    logger.debug("Raising UnwrapError: %s", message)
    return UnwrapError(message, error)


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing data."""

    data: T

    @property
    def success(self) -> Literal[True]:
        return True

    @property
    def error(self) -> None:
        """Always None for Ok results."""
        return None

    def is_ok(self) -> Literal[True]:
        """Returns True if this is an Ok result."""
        return True

    def is_err(self) -> Literal[False]:
        """Returns False for Ok results."""
        return False

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        """Applies fn to the contained data, returning Ok(fn(data))."""
        return Ok(fn(self.data))

    def map_err[F](self, fn: Callable[[Never], F]) -> Ok[T]:
        """Returns self unchanged since this is Ok."""
        return self

    def and_then[U, F](self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Applies fn to the contained data, returning its result as-is."""
        return fn(self.data)

    def or_else[F](self, fn: Callable[[Never], Result[T, F]]) -> Ok[T]:
        """Returns self unchanged since this is Ok."""
        return self

    def unwrap_or(self, default: T) -> T:
        """Returns the contained data, ignoring the default."""
        return self.data

    def unwrap_or_else(self, fn: Callable[[Never], T]) -> T:
        """Returns the contained data without calling fn."""
        return self.data

    def unwrap(self) -> T:
        """Returns the contained data."""
        return self.data

    def expect(self, message: str) -> T:
        """Returns the contained data; message is only used by Err."""
        return self.data


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error."""

    error: E

    @property
    def success(self) -> Literal[False]:
        return False

    @property
    def data(self) -> None:
        """Always None for Err results."""
        return None

    def is_ok(self) -> Literal[False]:
        """Returns False for Err results."""
        return False

    def is_err(self) -> Literal[True]:
        """Returns True if this is an Err result."""
        return True

    def map[U](self, fn: Callable[[Never], U]) -> Err[E]:
        """Returns self unchanged since this is Err."""
        return self

    def map_err[F](self, fn: Callable[[E], F]) -> Err[F]:
        """Applies fn to the contained error, returning Err(fn(error))."""
        return Err(fn(self.error))

    def and_then[U, F](self, fn: Callable[[Never], Result[U, F]]) -> Err[E]:
        """Returns self unchanged since this is Err."""
        return self

    def or_else[U, F](self, fn: Callable[[E], Result[U, F]]) -> Result[U, F]:
        """Applies fn to the contained error, returning its result as-is."""
        return fn(self.error)

    def unwrap_or[U](self, default: U) -> U:
        """Returns the default value."""
        return default

    def unwrap_or_else[U](self, fn: Callable[[E], U]) -> U:
        """Returns fn(error)."""
        return fn(self.error)

    def unwrap(self) -> Never:
        """Raises UnwrapError carrying the contained error."""
        cause = self.error if isinstance(self.error, BaseException) else None
        raise _unwrap_error("Called unwrap on an Err value", self.error) from cause

    def expect(self, message: str) -> Never:
        """Raises UnwrapError with message prefixed to the contained error."""
        cause = self.error if isinstance(self.error, BaseException) else None
        raise _unwrap_error(message, self.error) from cause


type Result[T, E] = Ok[T] | Err[E]


def ok[T](data: T) -> Ok[T]:
    """Creates a successful Result."""
    return Ok(data)


def err[E](error: E) -> Err[E]:
    """Creates a failed Result."""
    return Err(error)
