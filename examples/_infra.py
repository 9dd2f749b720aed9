from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str
    transient: bool = False

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class Row:
    id: int
    page: int


def _no_broken_pages() -> set[int]:
    return set()


@dataclass(slots=True)
class FakePagedApi:
    """Paged endpoint: each call returns one page of rows or a Failure."""

    name: str
    page_size: int = 3
    total_pages: int = 4
    broken_pages: set[int] = field(default_factory=_no_broken_pages)
    calls: int = 0

    def fetch_page(self, page: int) -> Result[list[Row], Failure]:
        self.calls += 1
        if page in self.broken_pages:
            return Error(Failure(f"{self.name}: page {page} unavailable", transient=True))
        start = page * self.page_size
        return Ok([Row(id=start + i, page=page) for i in range(self.page_size)])

    def pages(self) -> Iterator[Result[list[Row], Failure]]:
        for page in range(self.total_pages):
            yield self.fetch_page(page)


@dataclass(slots=True)
class FakeShard:
    """Database shard whose cursor streams rows one at a time."""

    name: str
    rows: int = 2
    available: bool = True

    def open_cursor(self) -> Result[Iterator[str], Failure]:
        if not self.available:
            return Error(Failure(f"{self.name}: connection refused"))
        return Ok(f"{self.name}:row{i}" for i in range(self.rows))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
