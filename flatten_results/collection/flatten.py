"""Flatten combinators

Collapse a container of Result[container of T, E] into a container of
Result[T, E] with extract + wrap pattern.

Ok(inner) expands into one Ok per inner value, Error passes through once,
unchanged. The output keeps the laziness of the outer input."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator
from typing import assert_never

from kungfu import Error, Ok, Result

from .._helpers import expand, extract_result, extract_writer_result, identity, merge_logs
from .._types import Cursor, Nested, NestedEager, NestedLazy, NoError
from ..writer import Log, WriterResult

_EXHAUSTED: typing.Final = object()


class FlatIterator[T, E]:
    """
    Lazy cursor over the flattened output.

    States:
    - need_outer: no active inner iterator (initial)
    - in_inner: pulling values from the inner container of the last Ok
    - done: outer exhausted, every further pull stops without side effects

    Construction touches nothing; iter() of the source happens on first pull.
    A pull advances the active inner iterator once and, only if it is
    exhausted, pulls outer elements until one of them produces a value.
    Exceptions from either input propagate to the caller of next(); the
    cursor keeps the raw inner iterator, so the next pull resumes it.
    """

    __slots__ = ("_source", "_extract", "_outer", "_inner", "_state")

    def __init__(
        self,
        source: Iterable[typing.Any],
        /,
        extract: Callable[[typing.Any], Nested[T, E]] = extract_result,
    ) -> None:
        self._source = source
        self._extract = extract
        self._outer: Iterator[typing.Any] | None = None
        self._inner: Iterator[T] | None = None
        self._state: Cursor = "need_outer"

    @property
    def state(self) -> Cursor:
        """Current cursor state."""
        return self._state

    def __iter__(self) -> FlatIterator[T, E]:
        return self

    def __next__(self) -> Result[T, E]:
        while True:
            match self._state:
                case "in_inner":
                    inner = typing.cast("Iterator[T]", self._inner)
                    value = next(inner, _EXHAUSTED)
                    if value is not _EXHAUSTED:
                        return Ok(typing.cast("T", value))
                    self._inner = None
                    self._state = "need_outer"
                case "need_outer":
                    if self._outer is None:
                        self._outer = iter(self._source)
                    raw = next(self._outer, _EXHAUSTED)
                    if raw is _EXHAUSTED:
                        self._outer = None
                        self._state = "done"
                        raise StopIteration
                    result = self._extract(raw)
                    match result:
                        case Ok(values):
                            self._inner = iter(values)
                            self._state = "in_inner"
                        case Error(_):
                            # Error is a one-element inner sequence: yield it and stay on outer
                            return result
                        case _ as unreachable:
                            assert_never(unreachable)
                case "done":
                    raise StopIteration
                case _ as unreachable:
                    assert_never(unreachable)

    def __repr__(self) -> str:
        return f"FlatIterator(state={self._state!r})"


# Generic combinator (extract + wrap pattern)
def flattenM[M, T, E, Raw](
    outer: Iterable[Raw],
    *,
    extract: Callable[[Raw], Nested[T, E]],
    wrap: Callable[[Iterator[Result[T, E]]], M],
) -> M:
    """
    Generic flatten combinator.

    extract: raw outer element -> Nested[T, E]
    wrap: lazy flattened cursor -> caller's container

    wrap decides when evaluation happens: identity keeps it lazy,
    list forces it immediately.
    """
    return wrap(FlatIterator(outer, extract))


# Sugar for lazy outer containers
def flatten[T, E](
    outer: Iterable[NestedLazy[T, E]],
) -> FlatIterator[T, E]:
    """
    Lazily flatten results of lazy sequences.

    Useful for streaming several sources that may or may not open, e.g.
    one cursor per database shard: rows arrive as Ok(row), a shard that
    failed to open shows up once as its Error.

    Nothing is pulled until the returned iterator is.

    Example:
        pages = (fetch_page(n) for n in itertools.count())
        for r in flatten(pages):
            ...
    """
    return flattenM(outer, extract=extract_result, wrap=identity)


def flatten_iterables[T, E](
    outer: Iterable[NestedEager[T, E]],
) -> FlatIterator[T, E]:
    """
    Lazily flatten results of materialized collections.

    Same contract as flatten(); the inner side is already in memory,
    the outer side is still pulled element by element. Fits paged API
    calls: each call returns Result[list[Item], E].
    """
    return flattenM(outer, extract=extract_result, wrap=identity)


# Sugar for eager outer containers
def flatten_all[T, E](
    outer: Iterable[Nested[T, E]],
) -> list[Result[T, E]]:
    """Flatten eagerly into a list. Inputs are iterated once, outer then inner."""
    return flattenM(outer, extract=extract_result, wrap=list)


# Sugar for writer results
def flatten_writer[T, E, W](
    outer: Iterable[WriterResult[Iterable[T], E, Log[W]]],
) -> WriterResult[list[Result[T, E]], NoError, Log[W]]:
    """
    Flatten writer results eagerly, merging logs in outer order.

    Logs of Error elements and of empty collections are kept. Never fails.
    """
    flat: list[Result[T, E]] = []
    logs: list[Log[W]] = []

    for wr in outer:
        logs.append(wr.log)
        flat.extend(expand(extract_writer_result(wr)))

    return WriterResult(Ok(flat), merge_logs(logs))


__all__ = (
    "FlatIterator",
    # Lazy
    "flatten",
    "flatten_iterables",
    # Eager
    "flatten_all",
    # Writer
    "flatten_writer",
    # Generic
    "flattenM",
)
