# tasklist/client.py - task API transport
import requests
from typing import List

from pydantic import TypeAdapter

from .config import Config
from .models import Task
from .utils import retry_on_failure, setup_logger

logger = setup_logger(__name__)

RETRYABLE_ERRORS = (requests.ConnectionError, requests.Timeout)

TASK_LIST = TypeAdapter(List[Task])


class TaskApiError(Exception):
    """The API answered with a success status other than 200."""

    def __init__(self, method: str, url: str, status_code: int):
        super().__init__(f"{method} {url} returned HTTP {status_code}")
        self.method = method
        self.url = url
        self.status_code = status_code


class TaskApiClient:
    def __init__(self, config: Config):
        self.config = config
        self.base_url = config.api_base_url
        self.headers = {
            config.api_key_header: config.api_key,
            "Content-Type": "application/json",
        }

    def _check(self, response: requests.Response, method: str, url: str) -> None:
        response.raise_for_status()
        if response.status_code != 200:
            raise TaskApiError(method, url, response.status_code)

    def _get_tasks(self) -> List[Task]:
        url = f"{self.base_url}/get"
        response = requests.get(url, headers=self.headers,
                                timeout=self.config.request_timeout)
        self._check(response, "GET", url)

        # any other shape, null included, raises ValidationError
        tasks = TASK_LIST.validate_python(response.json())
        logger.info(f"Fetched {len(tasks)} tasks")
        return tasks

    def fetch_tasks(self) -> List[Task]:
        """Fetch every task. Transport failures are retried with back-off."""
        fetch = retry_on_failure(max_retries=self.config.max_retries,
                                 exceptions=RETRYABLE_ERRORS)(self._get_tasks)
        return fetch()

    def update_task(self, task_id: str, is_complete: bool) -> None:
        """PATCH the completion flag of one task.

        The endpoint flips the stored value, so this call is never retried.
        """
        url = f"{self.base_url}/patch/{task_id}"
        response = requests.patch(url, headers=self.headers,
                                  json={"isComplete": is_complete},
                                  timeout=self.config.request_timeout)
        self._check(response, "PATCH", url)
        logger.info(f"Task {task_id} set isComplete={is_complete}")
