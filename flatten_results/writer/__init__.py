"""
Writer
======

Log accumulation next to results:
- Log[W]: monoidal list of entries
- WriterResult[T, E, W]: Result[T, E] paired with its log

Writers are how this library "logs": entries travel with the data
instead of going to a global handler.
"""

from .log import Log
from .result import WriterResult

__all__ = (
    "Log",
    "WriterResult",
)
