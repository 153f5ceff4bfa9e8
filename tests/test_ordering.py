# tests/test_ordering.py - urgency ordering tests
import pytest
from datetime import datetime, timedelta

import pytz

from tasklist.models import Task
from tasklist.ordering import is_past_due, sort_tasks

NOW = datetime(2025, 6, 15, tzinfo=pytz.utc)


def make_task(task_id, is_complete=False, due=None):
    return Task(id=task_id, description=f"Task {task_id}",
                is_complete=is_complete, due_date=due)


def ids(tasks):
    return [t.id for t in tasks]


def day(d):
    return datetime(2025, 6, d, tzinfo=pytz.utc)


@pytest.fixture
def mixed_tasks():
    return [
        make_task("1", False, NOW + timedelta(days=3)),
        make_task("2", True, NOW + timedelta(days=1)),
        make_task("3", False, NOW - timedelta(days=1)),
        make_task("4", False, NOW + timedelta(days=1)),
        make_task("5", False, NOW - timedelta(days=3)),
        make_task("6", True, NOW - timedelta(days=1)),
        make_task("7", False),
        make_task("8", True),
    ]


def test_past_due_then_incomplete_then_complete():
    """Past due first, then incomplete, then complete"""
    tasks = [
        make_task("1", False, day(10)),
        make_task("2", False, day(20)),
        make_task("3", True, day(1)),
    ]

    result = sort_tasks(tasks, NOW)

    assert ids(result) == ["1", "2", "3"]
    assert [t.is_past_due for t in result] == [True, False, False]


def test_undated_incomplete_after_past_due():
    """An undated incomplete task is never past due"""
    tasks = [make_task("undated"), make_task("late", False, day(1))]

    result = sort_tasks(tasks, NOW)

    assert ids(result) == ["late", "undated"]
    assert result[0].is_past_due is True
    assert result[1].is_past_due is False


def test_empty_list():
    assert sort_tasks([], NOW) == []


def test_complete_task_is_never_past_due():
    """Completion overrides an overdue date"""
    result = sort_tasks([make_task("1", True, day(1))], NOW)

    assert len(result) == 1
    assert result[0].is_past_due is False


def test_due_exactly_now_is_not_past_due():
    task = make_task("1", False, NOW)

    assert is_past_due(task, NOW) is False
    assert sort_tasks([task], NOW)[0].is_past_due is False


def test_single_task_unchanged_except_flag():
    task = make_task("1", False, day(1))

    result = sort_tasks([task], NOW)

    assert len(result) == 1
    assert result[0].model_dump() == task.model_dump()
    assert result[0].is_past_due is True


def test_within_bucket_order(mixed_tasks):
    """Dates ascending inside buckets, dated before undated"""
    result = sort_tasks(mixed_tasks, NOW)

    assert ids(result) == ["5", "3", "4", "1", "7", "2", "6", "8"]


def test_complete_bucket_keeps_input_order_for_dated_tasks():
    tasks = [
        make_task("a"),
        make_task("b", True),
        make_task("c", True, day(20)),
        make_task("d", True, day(1)),
    ]

    result = sort_tasks(tasks, NOW)

    assert ids(result) == ["a", "c", "d", "b"]


def test_partition_invariant(mixed_tasks):
    result = sort_tasks(mixed_tasks, NOW)
    ranks = [0 if t.is_past_due else 2 if t.is_complete else 1 for t in result]

    assert ranks == sorted(ranks)


def test_past_due_flag_matches_definition(mixed_tasks):
    for task in sort_tasks(mixed_tasks, NOW):
        expected = (task.due_date is not None and task.due_date < NOW
                    and not task.is_complete)
        assert task.is_past_due == expected


def test_resort_is_idempotent(mixed_tasks):
    once = sort_tasks(mixed_tasks, NOW)
    twice = sort_tasks(once, NOW)

    assert ids(twice) == ids(once)
    assert [t.is_past_due for t in twice] == [t.is_past_due for t in once]


def test_deterministic(mixed_tasks):
    assert ids(sort_tasks(mixed_tasks, NOW)) == ids(sort_tasks(mixed_tasks, NOW))


def test_input_is_not_mutated(mixed_tasks):
    before = [t.model_copy() for t in mixed_tasks]

    result = sort_tasks(mixed_tasks, NOW)

    assert [t.id for t in mixed_tasks] == [t.id for t in before]
    assert all(t.is_past_due is False for t in mixed_tasks)
    assert all(r is not t for r in result for t in mixed_tasks)


def test_flag_is_recomputed_from_now():
    """A stale flag from an earlier pass does not survive"""
    task = make_task("1", False, day(10))
    earlier = sort_tasks([task], day(1))
    later = sort_tasks(earlier, NOW)

    assert earlier[0].is_past_due is False
    assert later[0].is_past_due is True
    assert sort_tasks(later, day(1))[0].is_past_due is False


def test_naive_now_is_treated_as_utc():
    task = make_task("1", False, datetime(2025, 6, 15, 12, tzinfo=pytz.utc))

    assert sort_tasks([task], datetime(2025, 6, 15, 13))[0].is_past_due is True
    assert sort_tasks([task], datetime(2025, 6, 15, 11))[0].is_past_due is False


def test_other_timezones_compare_by_instant():
    toronto = pytz.timezone("America/Toronto")
    # 2025-06-14 21:00 in Toronto is 2025-06-15 01:00 UTC
    task = make_task("1", False, toronto.localize(datetime(2025, 6, 14, 21)))

    assert is_past_due(task, datetime(2025, 6, 15, 2, tzinfo=pytz.utc)) is True
    assert is_past_due(task, datetime(2025, 6, 15, 0, tzinfo=pytz.utc)) is False
