"""
Throughput benchmark — measures submits/sec and dispatches/sec in-process.

How it works:
1. Build N jobs up front with random priorities (seeded, so runs are repeatable)
2. Time submitting all of them to a fresh JobScheduler
3. Time draining the scheduler back to idle
4. Calculate: throughput = N / elapsed for each phase

Job construction is kept outside the timed sections, so the numbers
measure the heap and the facade's locking, nothing else. While draining
we also check that the dispatch order never goes backwards; a benchmark
that returns numbers for a broken order is worse than none.
"""

import logging
import random
import time

from config.settings import settings
from models.job import Job, JobFactory
from scheduler.priority import JobScheduler

logger = logging.getLogger(__name__)


class ThroughputBenchmark:

    def __init__(
        self,
        num_jobs: int = settings.BENCHMARK_NUM_JOBS,
        seed: int = settings.BENCHMARK_SEED,
        max_priority: int = settings.BENCHMARK_MAX_PRIORITY,
    ):
        self.num_jobs = num_jobs
        self.seed = seed
        self.max_priority = max_priority

    def make_jobs(self) -> list[Job]:
        rng = random.Random(self.seed)
        factory = JobFactory()
        return [
            factory.create(i, f"bench-{i}", rng.randint(1, self.max_priority))
            for i in range(self.num_jobs)
        ]

    def run(self) -> dict:
        jobs = self.make_jobs()
        scheduler = JobScheduler()

        start = time.perf_counter()
        for job in jobs:
            scheduler.submit(job)
        submit_elapsed = time.perf_counter() - start

        start = time.perf_counter()
        dispatched = 0
        previous = None
        for job in scheduler.drain():
            if previous is not None and job.sort_key < previous.sort_key:
                raise RuntimeError(
                    f"Dispatch order broken: {job.job_id} came after {previous.job_id}"
                )
            previous = job
            dispatched += 1
        dispatch_elapsed = time.perf_counter() - start

        logger.info(f"Benchmarked {dispatched} jobs (seed={self.seed})")
        return {
            "num_jobs": self.num_jobs,
            "seed": self.seed,
            "submit_sec": round(submit_elapsed, 4),
            "dispatch_sec": round(dispatch_elapsed, 4),
            "submit_jobs_per_sec": round(self.num_jobs / submit_elapsed, 2) if submit_elapsed else None,
            "dispatch_jobs_per_sec": round(dispatched / dispatch_elapsed, 2) if dispatch_elapsed else None,
        }
