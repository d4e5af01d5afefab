"""Data-first utilities over Result values.

The single-result helpers (map, map_err, and_then, ...) delegate to the methods
on Ok/Err and exist for call sites that prefer function style. The collection
helpers (combine_all, collect_errors, partition) fold many results into one
value. try_catch and try_catch_async are the boundary where a raised exception
becomes an Err.

Usage:
    from resultkit import ops

    parsed = ops.try_catch(lambda: json.loads(payload))
    rows = ops.combine_all(validate(r) for r in records)
    good, bad = ops.partition(results)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from typing_extensions import TypeIs

from resultkit.config import get_settings
from resultkit.result import Err, Ok, Result, err, ok

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

logger = logging.getLogger(__name__)


def _log_capture(exc: Exception) -> None:
    logger.log(get_settings().capture_log_level, "Captured %s: %s", type(exc).__name__, exc)


def try_catch[T](fn: Callable[[], T]) -> Result[T, Exception]:
    """Call fn, returning Ok(return value) or Err(raised exception).

    Only Exception subclasses are captured; KeyboardInterrupt, SystemExit and
    other BaseException subclasses propagate.
    """
    try:
        data = fn()
    except Exception as e:
        _log_capture(e)
        return err(e)
    return ok(data)


async def try_catch_async[T](fn: Callable[[], Awaitable[T]]) -> Result[T, Exception]:
    """Await fn(), returning Ok(result) or Err(raised exception).

    The returned coroutine never raises an Exception itself. Cancellation
    (asyncio.CancelledError) is not an Exception and propagates.
    """
    try:
        data = await fn()
    except Exception as e:
        _log_capture(e)
        return err(e)
    return ok(data)


def map[T, U, E](result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    return result.map(fn)


def map_err[T, E, F](result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    return result.map_err(fn)


def and_then[T, U, E](result: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    return result.and_then(fn)


def or_else[T, E, F](result: Result[T, E], fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
    return result.or_else(fn)


def unwrap_or[T, E](result: Result[T, E], default: T) -> T:
    return result.unwrap_or(default)


def unwrap_or_else[T, E](result: Result[T, E], fn: Callable[[E], T]) -> T:
    return result.unwrap_or_else(fn)


def unwrap[T, E](result: Result[T, E]) -> T:
    """Return the data of an Ok, or raise UnwrapError for an Err."""
    return result.unwrap()


def expect[T, E](result: Result[T, E], message: str) -> T:
    """Return the data of an Ok, or raise UnwrapError prefixed with message."""
    return result.expect(message)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()


def combine_all[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Combine results into one Ok holding every data value, in order.

    Stops at the first Err and returns that same Err object; later elements
    are never pulled from the iterable. An empty iterable gives Ok([]).
    """
    values: list[T] = []
    for index, result in enumerate(results):
        if isinstance(result, Err):
            logger.debug("combine_all stopped at Err in position %d", index)
            return result
        values.append(result.data)
    return ok(values)


def collect_errors[T, E](results: Iterable[Result[T, E]]) -> list[E]:
    """Return the error of every Err, in order. Ok entries are skipped."""
    return [result.error for result in results if isinstance(result, Err)]


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split results into (data of each Ok, error of each Err) in one pass."""
    successes: list[T] = []
    failures: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            successes.append(result.data)
        else:
            failures.append(result.error)
    return successes, failures
