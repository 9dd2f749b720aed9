"""
Log - entries written next to a result
======================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered log entries; Log() is the empty log.

    combine() returns a fresh log so logs shared between writer results
    are never extended in place.
    """

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        return Log[T](entries)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Entries of self followed by entries of other."""
        return Log[A]([*self, *other])


__all__ = ("Log",)
