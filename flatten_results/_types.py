"""
Core type definitions for flatten_results.

Aliases shared across the library: how laziness and eagerness are spelled,
and what a nested result looks like.
"""

from __future__ import annotations

import typing
from collections.abc import Collection, Iterable, Iterator
from typing import Literal

from kungfu import Result

# ============================================================================
# Container aliases
# ============================================================================

# Lazy = single-pass producer, pulled on demand (may be infinite)
type Lazy[T] = Iterator[T]

# Eager = materialized container, may be iterated any number of times
type Eager[T] = Collection[T]

# NoError = type representing "never fails" semantic
type NoError = typing.Never

# ============================================================================
# Nested result shapes
# ============================================================================

# Nested = result wrapping an inner container of values
type Nested[T, E] = Result[Iterable[T], E]

# NestedLazy / NestedEager = the two inner shapes accepted by flatten
type NestedLazy[T, E] = Result[Lazy[T], E]
type NestedEager[T, E] = Result[Eager[T], E]

# ============================================================================
# Cursor states
# ============================================================================

# Cursor = position of a lazy flatten: no active inner, inside one, or finished
type Cursor = Literal["need_outer", "in_inner", "done"]

__all__ = (
    # Containers
    "Lazy",
    "Eager",
    "NoError",
    # Nested results
    "Nested",
    "NestedLazy",
    "NestedEager",
    # Cursor
    "Cursor",
)
