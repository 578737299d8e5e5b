"""Main menu for managing today's task log."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from datetime import date
from enum import Enum
from pathlib import Path
from typing import TextIO

from dailytasks.menus import add_menu, complete_menu, delete_menu
from dailytasks.utility import normalize, show_tasks


class Choice(Enum):
    """Entries of the main menu."""

    ADD = "add"
    COMPLETE = "complete"
    DELETE = "delete"
    SHOW = "show"
    EXIT = "exit"


_ALIASES = {
    "1": Choice.ADD,
    "2": Choice.COMPLETE,
    "3": Choice.DELETE,
    "4": Choice.SHOW,
    "5": Choice.EXIT,
    **{choice.value: choice for choice in Choice},
}

MENU_TEXT = (
    "choose one of the following options: "
    "\n1)add today's activity"
    "\n2)complete an activity"
    "\n3)delete an activity"
    "\n4)show activities"
    "\n5)exit"
    "\nYour answer: "
)


def parse_choice(user_input: str) -> Choice | None:
    """Return the menu entry for a number or word, or None if not recognised."""
    return _ALIASES.get(normalize(user_input))


def run(
    directory: str | Path = ".",
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
    today: date | None = None,
) -> None:
    """Show the main menu repeatedly until the user exits or input ends."""
    read = input_func if input_func is not None else input
    out = output if output is not None else sys.stdout
    try:
        while True:
            out.write(MENU_TEXT)
            out.flush()
            choice = parse_choice(read())
            while choice is None:
                out.write("invalid answer...\n" + MENU_TEXT)
                out.flush()
                choice = parse_choice(read())
            if choice is Choice.EXIT:
                return
            if choice is Choice.ADD:
                add_menu(directory, today, read, out)
            elif choice is Choice.COMPLETE:
                complete_menu(directory, today, read, out)
            elif choice is Choice.DELETE:
                delete_menu(directory, today, read, out)
            else:
                show_tasks(directory, today, out, read)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Keep a log of today's tasks.")
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="directory holding the daily log files (default: current directory)",
    )
    args = parser.parse_args(argv)
    run(args.directory)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())