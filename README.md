# dailytasks

A small interactive to-do list for the terminal. Each day's tasks are kept
in a plain-text file named `log_YYYY-MM-DD.txt`, one task per line, so the
log is easy to read, edit or keep under version control.

## Installation

```
pip install .
```

## Usage

Start the menu from the directory where you want the daily logs kept:

```
dailytasks
```

or point it at another directory:

```
dailytasks --directory ~/tasks
```

(`-d` is the short form; the default is the current directory.)

You are offered five options. Type the number or the word shown; leading
and trailing spaces and tabs and letter case do not matter.

1. **add**: add tasks for today. Enter one task name per prompt; type
   `quit` to return to the main menu. Empty names are ignored. Names are
   stored trimmed and in lower case.
2. **complete**: pick a task by its line number to mark it as done. The
   line gets `--TASK COMPLETED` appended. Enter `0` to leave every task
   unchanged.
3. **delete**: pick a task by its line number to remove it from today's
   log. Enter `0` to keep every task.
4. **show**: list today's tasks and wait until you press Enter.
5. **exit**: leave the program.

If you give an answer that is not one of the listed choices, or a line number that does
not exist, the program rejects it and asks again. The program also stops when input
ends (for example on Ctrl-D).

## Using it from Python

The building blocks live in `dailytasks.utility`. The editing functions
return a new list and leave the one passed in unchanged:

```python
from datetime import date
from pathlib import Path

from dailytasks.utility import (
    complete_task,
    delete_task,
    log_filename,
    read_tasks,
    write_tasks,
)

path = Path(log_filename(date(2024, 5, 1)))   # log_2024-05-01.txt
tasks = read_tasks(path)
tasks = complete_task(tasks, "1")              # mark the first task done
tasks = delete_task(tasks, "2")                # remove the second task
write_tasks(path, tasks)
```

`complete_task` and `delete_task` take the task number as a string. `"0"`
changes nothing. A number with no matching task raises
`dailytasks.utility.TaskIndexError`, a subclass of `IndexError`.
`normalize`, `is_valid_choice`, `ask_user_input`, `format_activities`,
`show_todays_activities` and `show_tasks` cover input cleaning, validation
and display.

The interactive menus in `dailytasks.menus` (`add_menu`, `complete_menu`,
`delete_menu`) and the main loop `dailytasks.cli.run` accept a directory, a
date, an input function and an output stream. You can drive them from
scripts or tests as well as from a terminal. `dailytasks.cli.parse_choice`
maps an answer to a `Choice` member, or to `None` if it does not recognise
the answer.

## What it does not do

The package works only with today's log. You cannot plan tasks for another
day. It does not track streaks or statistics across days. It has no
recurring tasks that are added automatically at the start of a day.

## Running the tests

```
pip install .[test]
pytest
```