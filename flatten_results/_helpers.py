"""Internal helpers for flatten_results.

Common functions used across the flatten combinators.
These are not part of the public API but can be used for building custom
extract/wrap pairs for flattenM."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import reduce
from typing import assert_never

from kungfu import Error, Ok, Result

from .writer import Log, WriterResult

def identity[T](x: T) -> T:
    return x

# Extract functions for flattenM: outer element -> Nested[T, E]
def extract_result[T, E](r: Result[T, E]) -> Result[T, E]:
    """Plain nested results are already in the expected shape."""
    return r

def extract_writer_result[T, E, W](wr: WriterResult[T, E, Log[W]]) -> Result[T, E]:
    """Result part of a writer result; its log is dropped."""
    return wr.result

# Expansion step
def expand[T, E](result: Result[Iterable[T], E]) -> Iterator[Result[T, E]]:
    """
    Expand one outer element into its short output sequence.

    Ok(inner) -> Ok(v) for each v of inner, in order.
    Error(e)  -> the very same Error object, once.

    Lazy: nothing is pulled from inner until the returned iterator is.
    """
    match result:
        case Ok(inner):
            return (Ok(value) for value in inner)
        case Error(_):
            return iter((result,))
        case _ as unreachable:
            assert_never(unreachable)

# Log merging helpers
def merge_logs[W](logs: Iterable[Log[W]]) -> Log[W]:
    """Fold logs left to right with combine, starting from the empty log."""
    return reduce(Log.combine, logs, Log[W]())

__all__ = (
    # Identity
    "identity",
    # Extract functions
    "extract_result",
    "extract_writer_result",
    # Expansion
    "expand",
    # Log merging
    "merge_logs",
)
