"""Sharing state between threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor


class JobStatus:
    """A thread-safe count of completed jobs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._jobs_completed = 0

    @property
    def jobs_completed(self) -> int:
        with self._lock:
            return self._jobs_completed

    def complete_job(self) -> None:
        with self._lock:
            self._jobs_completed += 1


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> int:
    """Complete jobs on a worker thread while polling for progress.

    Prints ``waiting... `` on each poll and returns how many polls were made.
    """
    if jobs < 0:
        raise ValueError(f"number of jobs must not be negative, got {jobs}")
    status = JobStatus()

    def worker() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            status.complete_job()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    waits = 0
    while status.jobs_completed < jobs:
        print("waiting... ")
        waits += 1
        time.sleep(poll_delay)
    thread.join()
    return waits


def offset_sums(numbers: Sequence[int] = range(100), workers: int = 8) -> list[int]:
    """Sum every ``workers``-th number from each offset, one thread per offset."""
    if workers <= 0:
        raise ValueError(f"number of workers must be positive, got {workers}")
    shared = tuple(numbers)

    def sum_from(offset: int) -> int:
        total = sum(shared[offset::workers])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))