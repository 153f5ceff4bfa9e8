# tasklist/board.py - in-memory task collection and the actions on it
import asyncio
from datetime import datetime
from typing import Callable, List, Optional

import requests

from .client import TaskApiClient, TaskApiError
from .models import Task
from .ordering import sort_tasks
from .utils import setup_logger, utc_now

logger = setup_logger(__name__)

# ValueError covers undecodable JSON and pydantic.ValidationError
API_ERRORS = (requests.RequestException, TaskApiError, ValueError)


class TaskBoard:
    """Owns the task list shown to the user.

    All methods run on a single event loop. Blocking HTTP calls are pushed
    to a worker thread, but the collection itself is only touched from the
    loop, so a fetch and an update never write concurrently. When both are
    in flight, whichever response is applied last wins.
    """

    def __init__(self, client: TaskApiClient,
                 clock: Callable[[], datetime] = utc_now):
        self.client = client
        self.clock = clock
        self.tasks: List[Task] = []

    def find(self, task_id: str) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def ordered(self, now: Optional[datetime] = None) -> List[Task]:
        return sort_tasks(self.tasks, now or self.clock())

    async def load(self) -> bool:
        """Replace the collection with a fresh fetch. Keeps it on failure."""
        try:
            tasks = await asyncio.to_thread(self.client.fetch_tasks)
        except API_ERRORS as e:
            logger.error(f"Error fetching tasks: {e}")
            return False

        self.tasks = tasks
        return True

    async def toggle(self, task_id: str) -> bool:
        """Flip the completion flag of one task through the API."""
        task = self.find(task_id)
        if task is None:
            logger.warning(f"Unknown task id: {task_id}")
            return False

        new_value = not task.is_complete
        try:
            await asyncio.to_thread(self.client.update_task, task_id, new_value)
        except API_ERRORS as e:
            logger.error(f"Error updating task {task_id}: {e}")
            return False

        # a load may have swapped the collection while the PATCH was pending
        current = self.find(task_id)
        if current is None:
            logger.warning(f"Task {task_id} no longer loaded, update not applied locally")
            return False

        current.is_complete = new_value
        return True

    async def complete(self, task_id: str) -> bool:
        """Mark a task complete. Already complete tasks are left alone."""
        task = self.find(task_id)
        if task is not None and task.is_complete:
            logger.debug(f"Task {task_id} already complete")
            return False
        return await self.toggle(task_id)
