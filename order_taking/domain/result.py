"""Accumulating traversal over independently fallible results.

``Result.bind`` short-circuits on the first failure. ``sequence`` does
not: every result is inspected and every failure is kept, in input
order, so a caller can report all offending items at once.
"""

from collections.abc import Iterable
from functools import reduce
from typing import TypeVar

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")


def prepend(
    first: Result[T, E],
    rest: Result[tuple[T, ...], tuple[E, ...]],
) -> Result[tuple[T, ...], tuple[E, ...]]:
    """Combine one classified result with an already reduced accumulator.

    Args:
        first: The result to put in front.
        rest: Success with the values so far, or failure with the errors so far.

    Returns:
        The new accumulator.
    """
    if is_successful(first):
        if is_successful(rest):
            return Success((first.unwrap(), *rest.unwrap()))
        # Once the overall result is a failure, successes carry nothing.
        return rest
    if is_successful(rest):
        return Failure((first.failure(),))
    return Failure((first.failure(), *rest.failure()))


def sequence(
    results: Iterable[Result[T, E]],
) -> Result[tuple[T, ...], tuple[E, ...]]:
    """Turn results into one result, collecting every failure.

    Args:
        results: Results in input order.

    Returns:
        Success with all values in input order, or Failure with every
        error in input order. An empty input is ``Success(())``.
    """
    initial: Result[tuple[T, ...], tuple[E, ...]] = Success(())
    return reduce(
        lambda acc, item: prepend(item, acc),
        reversed(list(results)),
        initial,
    )
