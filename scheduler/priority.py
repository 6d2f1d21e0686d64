"""
Priority job scheduler.

Jobs with the lowest priority NUMBER run first. Among jobs with the same
priority, the one that arrived first (smaller arrival_time) runs first.
Every Job built by a JobFactory has a unique arrival_time, so no two jobs
ever tie: dispatch order is fully deterministic.

Data structure: OrderedPriorityQueue keyed on Job.sort_key
- submit:        insert      → O(log n)
- dispatch_next: remove_min  → O(log n)
- peek_next:     min         → O(1)

The scheduler is a thin facade: it adds no state of its own besides a
lock. Each call holds the lock for the whole insert/remove, so another
thread never sees the heap halfway through a sift.

Downside: starvation. A priority-8 job waits as long as priority-1 jobs
keep arriving. Aging would fix it; we don't implement it here.
"""

import logging
import threading
from typing import Iterator, Optional

from models.job import Job
from scheduler.heap import EMPTY, OrderedPriorityQueue

logger = logging.getLogger(__name__)


def job_sort_key(job: Job) -> tuple[int, int]:
    return job.sort_key


class JobScheduler:

    def __init__(self):
        self._queue: OrderedPriorityQueue[Job] = OrderedPriorityQueue(key=job_sort_key)
        self._lock = threading.Lock()

    def submit(self, job: Job) -> None:
        """Queue a job. Fields are not validated; ids and descriptions are opaque."""
        with self._lock:
            self._queue.insert(job)
            pending = self._queue.size()
        logger.debug(
            f"Submitted job {job.job_id} (priority={job.priority}, "
            f"arrival={job.arrival_time}), {pending} pending"
        )

    def peek_next(self) -> Optional[Job]:
        """View the next job without removing it. Returns None if idle."""
        with self._lock:
            job = self._queue.min()
        return None if job is EMPTY else job

    def dispatch_next(self) -> Optional[Job]:
        """
        Remove and return the next job, or None if idle.

        This is the only way a job leaves the scheduler. Calling it on an
        idle scheduler is normal and changes nothing.
        """
        with self._lock:
            job = self._queue.remove_min()
        if job is EMPTY:
            return None
        logger.debug(f"Dispatched job {job.job_id} (priority={job.priority})")
        return job

    def drain(self) -> Iterator[Job]:
        """Dispatch jobs one by one until the scheduler is idle."""
        while (job := self.dispatch_next()) is not None:
            yield job

    def is_idle(self) -> bool:
        with self._lock:
            return self._queue.is_empty()

    def pending_count(self) -> int:
        with self._lock:
            return self._queue.size()
