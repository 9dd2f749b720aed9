from .flatten import (
    FlatIterator,
    flatten,
    flatten_all,
    flatten_iterables,
    flatten_writer,
    flattenM,
)

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
