"""
flatten_results - flatten nested Result containers.

Turns a container of Result[container of T, E] into a container of
Result[T, E]: every Ok expands into one Ok per inner value, every Error
passes through once, unchanged.

Architecture:
- Generic combinator (flattenM) works with any outer element via extract + wrap
- Sugar functions for plain kungfu Results (flatten, flatten_iterables, flatten_all)
- Sugar function for WriterResult (flatten_writer)
"""

# Core types
from ._types import Cursor, Eager, Lazy, Nested, NestedEager, NestedLazy, NoError

# Internal helpers (for custom extract/wrap pairs)
from . import _helpers

# Writer
from . import writer
from .writer import Log, WriterResult

# Collection operations
from .collection import (
    FlatIterator,
    # Lazy
    flatten,
    flatten_iterables,
    # Eager
    flatten_all,
    # Writer
    flatten_writer,
    # Generic
    flattenM,
)

__all__ = (
    # Types
    "Cursor",
    "Eager",
    "Lazy",
    "Nested",
    "NestedEager",
    "NestedLazy",
    "NoError",
    # Internal helpers
    "_helpers",
    # Writer module
    "writer",
    "Log",
    "WriterResult",
    # Collection
    "FlatIterator",
    "flatten",
    "flatten_iterables",
    "flatten_all",
    "flatten_writer",
    "flattenM",
)
