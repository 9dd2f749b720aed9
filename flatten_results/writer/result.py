"""
WriterResult - Result with accumulated log
==========================================
"""

from __future__ import annotations

from kungfu import Result


class WriterResult[T, E, W]:
    """
    Result paired with the log written while producing it.

    Pattern-matchable as ``WriterResult(result, log)``. Equality compares
    both parts, so two writer results are equal iff their results and logs are.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        """The underlying Result."""
        return self._result

    @property
    def log(self) -> W:
        """The accumulated log."""
        return self._log

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriterResult):
            return NotImplemented
        return self._result == other._result and self._log == other._log

    # Unhashable: logs are mutable lists
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
