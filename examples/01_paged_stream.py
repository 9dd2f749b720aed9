from __future__ import annotations

from itertools import count, islice

from _infra import FakePagedApi, banner, run

from flatten_results import flatten_iterables
from kungfu import Error, Ok


def main() -> None:
    banner("01_paged_stream: lazy pages -> stream of rows")

    api = FakePagedApi(name="api", page_size=3, broken_pages={1})

    # Infinite page source: only the pages we actually read get fetched.
    pages = (api.fetch_page(n) for n in count())
    rows = flatten_iterables(pages)

    for result in islice(rows, 7):
        match result:
            case Ok(row):
                print(f"row {row.id} (page {row.page})")
            case Error(err):
                print(f"skipped: {err}")

    print(f"pages fetched: {api.calls}")


if __name__ == "__main__":
    run(main)
