"""Pytest configuration and fixtures.

Provides instrumented sources for laziness checks: iterators that record
every pull, and iterators that blow up if forced.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


class NotLazyError(RuntimeError):
    """Raised by a source element that must never be evaluated."""


@dataclass
class PullLog:
    """Shared journal of pulls, in the order they happened."""

    events: list[str] = field(default_factory=list)

    def source(self, name: str, items: Iterable[Any]) -> Iterator[Any]:
        """Wrap items so every pull is journaled as 'name:index'."""

        def gen() -> Iterator[Any]:
            for i, item in enumerate(items):
                self.events.append(f"{name}:{i}")
                yield item

        return gen()


def exploding(message: str = "NOT LAZY") -> Iterator[Any]:
    """Iterator that raises on its first pull."""

    def gen() -> Iterator[Any]:
        raise NotLazyError(message)
        yield  # pragma: no cover

    return gen()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def pulls() -> PullLog:
    return PullLog()


@pytest.fixture
def boom() -> Callable[..., Iterator[Any]]:
    return exploding
