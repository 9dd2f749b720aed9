from __future__ import annotations

from _infra import Failure, FakePagedApi, Row, banner, run

from flatten_results import flatten_writer
from flatten_results.writer import Log, WriterResult
from kungfu import Error, Ok, Result


def fetch_page_w(api: FakePagedApi, page: int) -> WriterResult[list[Row], Failure, Log[str]]:
    """
    "Pure" Writer function: returns WriterResult (Result + Log), no side effects.
    """
    result: Result[list[Row], Failure] = api.fetch_page(page)
    log: Log[str] = Log.of(f"{api.name}:fetch_page({page})")
    return WriterResult(result, log)


def main() -> None:
    banner("03_writer_audit: flattened rows + merged audit log")

    api = FakePagedApi(name="api", page_size=2, total_pages=3, broken_pages={2})

    wr = flatten_writer(fetch_page_w(api, n) for n in range(api.total_pages))
    match wr.result:
        case Ok(rows):
            for r in rows:
                print(f"  {r!r}")
            print(f"log: {list(wr.log)!r}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
