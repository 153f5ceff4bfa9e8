# tasklist/render.py - text rendering of an ordered task list
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader

from .models import Task
from .utils import local_date

TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates'

MARKERS = {
    "complete": "[x]",
    "past-due": "[!]",
    "default": "[ ]",
}


def task_style(task: Task) -> str:
    if task.is_complete:
        return "complete"
    if task.is_past_due:
        return "past-due"
    return "default"


def due_label(task: Task, timezone: str = "UTC") -> str:
    if task.due_date is None:
        return "No due date"
    return local_date(task.due_date, timezone).isoformat()


def render_task_list(tasks: Iterable[Task], timezone: str = "UTC") -> str:
    """Render tasks in the order given; sorting is the caller's job."""
    env = Environment(loader=FileSystemLoader(TEMPLATE_DIR),
                      trim_blocks=True, lstrip_blocks=True)
    env.filters["marker"] = lambda task: MARKERS[task_style(task)]
    env.filters["due_label"] = lambda task: due_label(task, timezone)
    tmpl = env.get_template("task_list.jinja2")
    return tmpl.render(tasks=list(tasks)).rstrip("\n")
