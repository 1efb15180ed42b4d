"""Command-line surface for the todo list.

One subcommand per invocation. The caller loads the list, dispatch() applies
the command (saving when it mutates) and prints the result.
"""
import argparse
from pathlib import Path
from typing import List, Optional
from storage import Storage
from task_list import TaskList

__version__ = "0.1.0"

# closed set of commands; dispatch() handles each one
COMMANDS = ('add', 'delete', 'edit', 'done', 'list', 'search', 'filter', 'save', 'load')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo", description="Simple todo list")
    parser.add_argument("-f", "--file", type=Path, default=None,
                        help="tasks file (default: $TODO_FILE or todos.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug output on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    p = sub.add_parser("add", help="Add a new task")
    p.add_argument("description")

    p = sub.add_parser("delete", help="Delete task(s) by id")
    p.add_argument("id", type=int)

    p = sub.add_parser("edit", help="Replace a task's description")
    p.add_argument("id", type=int)
    p.add_argument("description")

    p = sub.add_parser("done", help="Mark a task as done")
    p.add_argument("id", type=int)

    sub.add_parser("list", help="List all tasks")

    p = sub.add_parser("search", help="Case-insensitive search in descriptions")
    p.add_argument("keyword")

    p = sub.add_parser("filter", help="List tasks by status")
    group = p.add_mutually_exclusive_group(required=True)
    group.add_argument("-d", "--done", action="store_true", help="completed tasks")
    group.add_argument("-n", "--not-done", action="store_true", help="pending tasks")

    p = sub.add_parser("save", help="Write the current list to another file")
    p.add_argument("filepath", type=Path)

    p = sub.add_parser("load", help="Load a list from a file and print it")
    p.add_argument("filepath", type=Path)
    return parser


def save_and_report(task_list: TaskList, filepath: Path) -> None:
    Storage.save(task_list, filepath)
    print(f"Todos saved to {filepath}")


def dispatch(args: argparse.Namespace, task_list: TaskList, tasks_file: Path) -> TaskList:
    """Apply one parsed command to task_list and print its output.

    Mutating commands save back to tasks_file. Returns the list the command
    ended with ('load' replaces it). StorageError propagates to the caller.
    """
    cmd = args.command
    if cmd == 'add':
        task_list.add(args.description)
        message = "Task added."
    elif cmd == 'delete':
        task_list.delete(args.id)
        message = "Task deleted."
    elif cmd == 'edit':
        task_list.edit(args.id, args.description)
        message = "Task edited."
    elif cmd == 'done':
        task_list.mark_done(args.id)
        message = "Task marked as done."
    elif cmd == 'list':
        print(task_list.list())
        return task_list
    elif cmd == 'search':
        print(task_list.search(args.keyword))
        return task_list
    elif cmd == 'filter':
        print(task_list.filter_by_status(bool(args.done)))
        return task_list
    elif cmd == 'save':
        save_and_report(task_list, args.filepath)
        return task_list
    elif cmd == 'load':
        task_list = Storage.load(args.filepath)
        print(task_list.list())
        return task_list
    else:
        raise ValueError(f"unknown command: {cmd}")

    # add, delete, edit and done fall through to here
    save_and_report(task_list, tasks_file)
    print(message)
    return task_list


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
