"""Helpers for running callables on worker threads."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


def run_async(target: Callable, *args: Any, daemon: bool = True) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=daemon)
    thread.start()
    return thread


def run_concurrently(target: Callable[[], Any], count: int) -> list[Any]:
    """Call ``target`` from ``count`` threads released together; return results in thread order.

    The first exception raised by any thread is re-raised after all threads finish.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1 (got {count})")
    barrier = threading.Barrier(count)
    results: list[Any] = [None] * count
    errors: list[Exception] = []

    def _worker(index: int) -> None:
        barrier.wait()
        try:
            results[index] = target()
        except Exception as exc:
            errors.append(exc)

    threads = [run_async(_worker, i, daemon=False) for i in range(count)]
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]
    return results
