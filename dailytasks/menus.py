"""Interactive menus that add, complete and delete today's tasks."""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import TextIO

from dailytasks.utility import (
    ask_user_input,
    complete_task,
    delete_task,
    log_filename,
    normalize,
    read_tasks,
    show_todays_activities,
    write_tasks,
)

QUIT_WORD = "quit"
OPEN_ERROR = "there has been some error opening the file..."


def _log_path(directory: str | Path, today: date | None) -> Path:
    return Path(directory) / log_filename(today)


def _load_tasks(path: Path, out: TextIO) -> list[str]:
    try:
        return read_tasks(path)
    except OSError:
        out.write(OPEN_ERROR)
        return []


def add_menu(
    directory: str | Path = ".",
    today: date | None = None,
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
) -> list[str]:
    """Append tasks to today's log until 'quit' is entered; return those added."""
    read = input_func if input_func is not None else input
    out = output if output is not None else sys.stdout
    added: list[str] = []
    with _log_path(directory, today).open("a", encoding="utf-8") as log:
        while True:
            out.write(f"if you input '{QUIT_WORD}' you will exit this menu\n\n")
            out.write("please insert name of the task: ")
            out.flush()
            try:
                user_input = normalize(read())
            except EOFError:
                break
            if user_input == QUIT_WORD:
                break
            if user_input:
                log.write(f"{user_input}\n")
                log.flush()
                added.append(user_input)
    return added


def complete_menu(
    directory: str | Path = ".",
    today: date | None = None,
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
) -> list[str]:
    """Let the user mark one of today's tasks as completed; return the tasks."""
    out = output if output is not None else sys.stdout
    path = _log_path(directory, today)
    tasks = _load_tasks(path, out)
    show_todays_activities(tasks, out)
    out.write(
        "\nplease specify the line number of the task to be completed. "
        "Insert '0' to not delete any.\nYour answer: "
    )
    out.flush()
    choice = ask_user_input(tasks, input_func, out)
    if choice != "0":
        tasks = complete_task(tasks, choice)
        write_tasks(path, tasks)
    return tasks


def delete_menu(
    directory: str | Path = ".",
    today: date | None = None,
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
) -> list[str]:
    """Let the user delete one of today's tasks; return the remaining tasks."""
    out = output if output is not None else sys.stdout
    path = _log_path(directory, today)
    tasks = _load_tasks(path, out)
    show_todays_activities(tasks, out)
    out.write(
        "\nplease specify the line to be deleted. "
        "Insert '0' to not delete any.\nYour answer: "
    )
    out.flush()
    choice = ask_user_input(tasks, input_func, out)
    tasks = delete_task(tasks, choice)
    write_tasks(path, tasks)
    return tasks