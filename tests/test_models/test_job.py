"""Tests for the Job value type and JobFactory."""

import dataclasses
import threading

import pytest

from models.job import Job, JobFactory, default_factory


def test_factory_assigns_increasing_arrival_times_from_zero(factory):
    jobs = [factory.create(i, "task", 5) for i in range(3)]

    assert [job.arrival_time for job in jobs] == [0, 1, 2]
    assert factory.next_arrival_time == 3


def test_factory_start_is_configurable():
    factory = JobFactory(start=100)
    assert factory.next_arrival_time == 100
    assert factory.create("x", "task", 1).arrival_time == 100
    assert factory.next_arrival_time == 101


def test_separate_factories_do_not_share_state():
    a = JobFactory()
    b = JobFactory()
    a.create(1, "task", 1)
    a.create(2, "task", 1)

    assert b.create(3, "task", 1).arrival_time == 0


def test_default_factory_is_shared_and_monotonic():
    first = default_factory.create("a", "task", 1)
    second = default_factory.create("b", "task", 1)

    assert second.arrival_time == first.arrival_time + 1
    assert default_factory.next_arrival_time == second.arrival_time + 1


def test_job_is_immutable(factory):
    job = factory.create(1, "task", 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        job.priority = 1


def test_fields_are_kept_as_given(factory):
    job = factory.create("opaque-id", "", -7)

    assert job.job_id == "opaque-id"
    assert job.description == ""
    assert job.priority == -7


def test_ordering_is_priority_then_arrival(factory):
    a = factory.create("a", "task", 5)
    b = factory.create("b", "task", 1)
    c = factory.create("c", "task", 5)

    assert b < a
    assert a < c
    assert not c < a
    assert sorted([c, a, b]) == [b, a, c]
    assert a.sort_key == (5, 0)


def test_comparing_with_non_job_is_unsupported(factory):
    with pytest.raises(TypeError):
        factory.create(1, "task", 1) < 5


def test_concurrent_creation_gives_unique_arrival_times():
    factory = JobFactory()
    results: list[Job] = []
    lock = threading.Lock()

    def produce():
        made = [factory.create(i, "task", 1) for i in range(500)]
        with lock:
            results.extend(made)

    threads = [threading.Thread(target=produce) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    arrival_times = sorted(job.arrival_time for job in results)
    assert arrival_times == list(range(4000))
    assert factory.next_arrival_time == 4000
