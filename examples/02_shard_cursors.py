from __future__ import annotations

from _infra import FakeShard, banner, run

from flatten_results import flatten, flatten_all
from kungfu import Error, Ok


def main() -> None:
    banner("02_shard_cursors: streamed cursors, failed shards kept in place")

    shards = [
        FakeShard(name="eu", rows=2),
        FakeShard(name="us", available=False),
        FakeShard(name="ap", rows=1),
    ]

    for result in flatten(shard.open_cursor() for shard in shards):
        match result:
            case Ok(row):
                print(f"ok: {row}")
            case Error(err):
                print(f"error: {err}")

    # Eager variant: everything materialized at once
    snapshot = flatten_all([Ok([1, 2]), Error("down"), Ok([3])])
    print(f"snapshot: {snapshot!r}")


if __name__ == "__main__":
    run(main)
