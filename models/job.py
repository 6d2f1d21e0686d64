"""
Job value type and the factory that stamps arrival order onto it.

A Job is immutable once built. Its ordering is (priority, arrival_time):
- priority: lower number = served earlier (negative values are fine)
- arrival_time: sequence number from a JobFactory, used only to break ties

Why a factory instead of a class-level counter?
The counter is state, and state belongs to an object you can hold. Each
JobFactory owns its own sequence, so two tests never share a counter and
you can build a deterministic scenario by starting a fresh factory.
Code that wants one sequence for the whole process uses `default_factory`.
"""

import itertools
import threading
from dataclasses import dataclass
from typing import Hashable

from config.settings import settings


@dataclass(frozen=True)
class Job:
    job_id: Hashable
    description: str
    priority: int
    arrival_time: int  # assigned by JobFactory, never by the caller

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.priority, self.arrival_time)

    def __lt__(self, other: "Job") -> bool:
        if not isinstance(other, Job):
            return NotImplemented
        return self.sort_key < other.sort_key


class JobFactory:
    """
    Builds Jobs with strictly increasing arrival times.

    Allocation happens under a lock, so several producer threads can share
    one factory and still get unique, ordered sequence numbers.
    """

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)
        self._next = start
        self._lock = threading.Lock()

    @property
    def next_arrival_time(self) -> int:
        """The arrival_time the next created job will receive."""
        return self._next

    def create(self, job_id: Hashable, description: str, priority: int) -> Job:
        with self._lock:
            arrival_time = next(self._counter)
            self._next = arrival_time + 1
        return Job(
            job_id=job_id,
            description=description,
            priority=priority,
            arrival_time=arrival_time,
        )


# Shared sequence for callers that want every job in the process ordered together
default_factory = JobFactory(start=settings.ARRIVAL_COUNTER_START)
