"""Shared helpers for reading, showing and editing the daily task log."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from datetime import date
from pathlib import Path
from typing import TextIO

COMPLETED_SUFFIX = "--TASK COMPLETED"
_TRIM_CHARS = " \t"
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class TaskIndexError(IndexError):
    """Raised when a task number does not refer to an existing task."""


def normalize(word: str) -> str:
    """Trim spaces and tabs from both ends and lower-case ASCII letters."""
    return word.strip(_TRIM_CHARS).translate(_ASCII_LOWER)


def is_valid_choice(user_input: str, tasks: Sequence[str]) -> bool:
    """Return True if the input is a task number from 0 to len(tasks)."""
    return user_input in {str(number) for number in range(len(tasks) + 1)}


def ask_user_input(
    tasks: Sequence[str],
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
) -> str:
    """Ask until a valid task number (or '0') is entered and return it."""
    read = input_func if input_func is not None else input
    out = output if output is not None else sys.stdout
    user_input = normalize(read())
    while not is_valid_choice(user_input, tasks):
        out.write(format_activities(tasks))
        out.write("your input doesn't make sense, please answer again: ")
        out.flush()
        user_input = normalize(read())
    return user_input


def read_tasks(path: str | Path) -> list[str]:
    """Return the lines of a task file, without line terminators."""
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def format_activities(tasks: Sequence[str]) -> str:
    """Render the numbered list of today's activities."""
    body = "".join(f"{number}){task}\n" for number, task in enumerate(tasks, 1))
    return "this is the content of today's activity: \n" + body


def show_todays_activities(
    tasks: Sequence[str], output: TextIO | None = None
) -> None:
    """Print the numbered list of today's activities."""
    out = output if output is not None else sys.stdout
    out.write(format_activities(tasks))
    out.flush()


def show_tasks(
    directory: str | Path = ".",
    today: date | None = None,
    output: TextIO | None = None,
    wait: Callable[[], object] | None = None,
) -> list[str]:
    """Print today's tasks from the log file, then wait for the user."""
    out = output if output is not None else sys.stdout
    path = Path(directory) / log_filename(today)
    try:
        tasks = read_tasks(path)
    except FileNotFoundError:
        tasks = []
    out.write("these are today's tasks: \n")
    for number, task in enumerate(tasks, 1):
        out.write(f"{number}) {task}\n")
    out.write("\n\npress any key to continue...")
    out.flush()
    (wait if wait is not None else input)()
    return tasks


def _task_index(tasks: Sequence[str], user_input: str) -> int | None:
    """Return the zero-based index for a choice, or None for '0'."""
    number = int(user_input)
    if user_input == "0":
        return None
    index = number - 1
    if not 0 <= index < len(tasks):
        raise TaskIndexError(f"no task number {user_input}")
    return index


def complete_task(tasks: Sequence[str], user_input: str) -> list[str]:
    """Return a copy of the tasks with the chosen one marked as completed."""
    result = list(tasks)
    index = _task_index(result, user_input)
    if index is not None:
        result[index] += COMPLETED_SUFFIX
    return result


def delete_task(tasks: Sequence[str], user_input: str) -> list[str]:
    """Return a copy of the tasks without the chosen one."""
    result = list(tasks)
    index = _task_index(result, user_input)
    if index is not None:
        del result[index]
    return result


def write_tasks(path: str | Path, tasks: Sequence[str]) -> None:
    """Overwrite the task file with one task per line."""
    Path(path).write_text("".join(f"{task}\n" for task in tasks), encoding="utf-8")


def log_filename(today: date | None = None) -> str:
    """Return the log file name for the given day (default: today)."""
    day = today if today is not None else date.today()
    return f"log_{day:%Y-%m-%d}.txt"