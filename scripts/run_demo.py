"""
Demo driver — submits a handful of jobs and drains them in priority order.

Usage:
    python -m scripts.run_demo                        # built-in sample jobs
    python -m scripts.run_demo --jobs-file jobs.json  # your own jobs
    python -m scripts.run_demo --peek                 # show the head first

A jobs file is JSON, either a list or {"jobs": [...]}:
    [
        {"id": 1, "description": "Rebuild index", "priority": 2},
        {"id": 2, "description": "Send digest", "priority": 7}
    ]

The scheduler hands back Job objects; everything printed here is
formatted by this script. Logs go to stderr (set LOG_LEVEL=DEBUG to
see every submit/dispatch).
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from config.settings import settings
from models.job import Job, JobFactory
from models.schemas import JobBatch, JobSpec
from scheduler.priority import JobScheduler

logger = logging.getLogger(__name__)

SAMPLE_JOBS = [
    JobSpec(id=101, description="Normal task", priority=5),
    JobSpec(id=102, description="Urgent bug fix", priority=1),
    JobSpec(id=103, description="Background cleanup", priority=8),
    JobSpec(id=104, description="Customer support ticket", priority=3),
    JobSpec(id=105, description="Critical system alert", priority=1),
]


def format_job(job: Job) -> str:
    return f"Job{{id={job.job_id}, priority={job.priority}, desc='{job.description}'}}"


def load_jobs(path: str) -> list[JobSpec]:
    """Read and validate a jobs file. Raises OSError or ValidationError."""
    with open(path, "rb") as f:
        raw = f.read()
    return JobBatch.from_json(raw).jobs


def run(specs: Sequence[JobSpec], factory: JobFactory, peek: bool = False) -> list[Job]:
    """Submit every spec in order, print the drain, and return the dispatched jobs."""
    scheduler = JobScheduler()
    for spec in specs:
        scheduler.submit(factory.create(spec.id, spec.description, spec.priority))

    print(f"Jobs added. Total jobs: {scheduler.pending_count()}")
    if peek:
        head = scheduler.peek_next()
        print(f"Next up -> {format_job(head) if head is not None else 'nothing'}")
    print("Processing jobs in priority order:\n")

    dispatched = []
    for job in scheduler.drain():
        print(f"Processing -> {format_job(job)}")
        dispatched.append(job)

    print(f"\nAll jobs processed. Scheduler empty? {scheduler.is_idle()}")
    logger.info(f"Dispatched {len(dispatched)} jobs")
    return dispatched


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Priority Job Scheduler demo")
    parser.add_argument(
        "--jobs-file", type=str, default=None,
        help="JSON file with job definitions (default: built-in sample jobs)",
    )
    parser.add_argument(
        "--peek", action="store_true",
        help="Print the next job before draining the scheduler",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.jobs_file is None:
        specs = SAMPLE_JOBS
    else:
        try:
            specs = load_jobs(args.jobs_file)
        except (OSError, ValidationError) as e:
            logger.error(f"Could not load jobs from {args.jobs_file}: {e}")
            print(f"error: invalid jobs file {args.jobs_file}: {e}", file=sys.stderr)
            return 2
        logger.info(f"Loaded {len(specs)} jobs from {args.jobs_file}")

    run(specs, JobFactory(start=settings.ARRIVAL_COUNTER_START), peek=args.peek)
    return 0


if __name__ == "__main__":
    sys.exit(main())
