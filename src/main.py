"""Main entry point for the terminal todo list.

Reads settings, configures logging, then brackets exactly one command with
a load of the tasks file and (for mutating commands) a save.
"""
import logging
import sys
from typing import List, Optional
from cli import parse_args, dispatch
from config import get_settings
from logging_setup import level_from_name, setup_logging
from storage import Storage, StorageError

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    console_level = logging.DEBUG if args.verbose else level_from_name(settings.log_level)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    tasks_file = args.file if args.file is not None else settings.tasks_file
    logger.debug("command=%s file=%s", args.command, tasks_file)
    try:
        task_list = Storage.load(tasks_file)
        dispatch(args, task_list, tasks_file)
    except StorageError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
