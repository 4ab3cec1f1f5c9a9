"""Recursive lists, sharing data across threads, and lint-clean comparisons."""

from __future__ import annotations

import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; a tail of None ends the list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2))


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th value from each offset, one thread per offset."""
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(lambda offset: sum(shared[offset::workers]), offset)
            for offset in range(workers)
        ]
        return [future.result() for future in futures]


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> int:
    """Complete jobs in a worker thread while polling; return how many polls waited."""
    if jobs < 0:
        raise ValueError(f"jobs must not be negative, got {jobs}")
    lock = threading.Lock()
    completed = 0

    def work() -> None:
        nonlocal completed
        for _ in range(jobs):
            time.sleep(job_delay)
            with lock:
                completed += 1

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    waits = 0
    while True:
        with lock:
            if completed >= jobs:
                break
        waits += 1
        time.sleep(poll_delay)
    worker.join()
    return waits


def floats_differ(x: float, y: float) -> bool:
    """Compare floats with a tolerance of machine epsilon rather than exactly."""
    return abs(y - x) > sys.float_info.epsilon


def add_optional(base: int = 42, option: int | None = 12) -> int:
    """Add the optional value to base when there is one."""
    if option is not None:
        base += option
    return base