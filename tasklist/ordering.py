"""Urgency ordering for task lists.

Tasks are split into three buckets, emitted in this order:

1. past due: incomplete with a due date strictly before ``now``, oldest first;
2. other incomplete: dated tasks (soonest first) before undated ones;
3. complete: dated tasks before undated ones, otherwise in input order.

``is_past_due`` is recomputed for every task on each call. The input records
are never modified; the result holds copies.
"""
from datetime import datetime
from typing import Iterable, List

import pytz

from .models import Task
from .utils import ensure_aware

PAST_DUE, INCOMPLETE, COMPLETE = 0, 1, 2

_EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)


def is_past_due(task: Task, now: datetime) -> bool:
    if task.is_complete or task.due_date is None:
        return False
    return task.due_date < ensure_aware(now)


def _bucket(task: Task) -> int:
    if task.is_complete:
        return COMPLETE
    if task.is_past_due:
        return PAST_DUE
    return INCOMPLETE


def _sort_key(task: Task):
    bucket = _bucket(task)
    undated = task.due_date is None
    if bucket == COMPLETE:
        return bucket, undated, _EPOCH
    return bucket, undated, task.due_date or _EPOCH


def sort_tasks(tasks: Iterable[Task], now: datetime) -> List[Task]:
    """Return ``tasks`` ordered by urgency as of ``now``."""
    now = ensure_aware(now)
    flagged = [
        task.model_copy(update={"is_past_due": is_past_due(task, now)})
        for task in tasks
    ]
    # sorted() is stable, so ties keep their input order
    return sorted(flagged, key=_sort_key)
