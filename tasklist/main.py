# tasklist/main.py - command line entry point

import argparse
import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .board import TaskBoard
from .client import TaskApiClient
from .config import Config
from .render import render_task_list
from .utils import setup_logger

logger = setup_logger("tasklist.main")


async def run(cfg: Config, command: str, task_id: Optional[str] = None) -> int:
    board = TaskBoard(TaskApiClient(cfg))
    if not await board.load():
        return 1

    ok = True
    if command == "complete":
        ok = await board.complete(task_id)
    elif command == "toggle":
        ok = await board.toggle(task_id)

    print(render_task_list(board.ordered(), cfg.timezone))
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist", description="Show and update tasks from the task API"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Show tasks ordered by urgency")
    complete = sub.add_parser("complete", help="Mark a task complete")
    complete.add_argument("task_id")
    toggle = sub.add_parser("toggle", help="Flip a task between complete and incomplete")
    toggle.add_argument("task_id")
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("tasklist"):
                logging.getLogger(name).setLevel(logging.DEBUG)

    try:
        cfg = Config.from_env()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logger.debug(f"API_BASE_URL: {cfg.api_base_url or 'not set'}")
    logger.debug(f"API_KEY: {'set' if cfg.api_key else 'not set'}")

    if not cfg.api_base_url:
        logger.error("API_BASE_URL is not set")
        return 1

    return asyncio.run(run(cfg, args.command, getattr(args, "task_id", None)))


if __name__ == "__main__":
    sys.exit(main())
