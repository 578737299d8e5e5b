import io
from datetime import date

import pytest

from dailytasks.utility import (
    TaskIndexError,
    ask_user_input,
    complete_task,
    delete_task,
    format_activities,
    is_valid_choice,
    log_filename,
    normalize,
    read_tasks,
    show_tasks,
    show_todays_activities,
    write_tasks,
)


def _inputs(*values):
    it = iter(values)
    return lambda: next(it)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Quit\t", "quit"),
        ("quit", "quit"),
        (" \t ", ""),
        ("", ""),
        ("\tADD task ", "add task"),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_normalize_leaves_non_ascii_untouched():
    assert normalize("ÀB") == "Àb"


def test_normalize_keeps_inner_whitespace():
    assert normalize("  A  B  ") == "a  b"


def test_is_valid_choice_accepts_zero_to_length():
    tasks = ["a", "b"]
    assert [is_valid_choice(str(n), tasks) for n in range(4)] == [
        True,
        True,
        True,
        False,
    ]


@pytest.mark.parametrize("value", ["-1", "01", "x", "", "1.0"])
def test_is_valid_choice_rejects_other_strings(value):
    assert is_valid_choice(value, ["a", "b"]) is False


def test_is_valid_choice_empty_list_only_zero():
    assert is_valid_choice("0", []) is True
    assert is_valid_choice("1", []) is False


def test_ask_user_input_valid_first_time():
    out = io.StringIO()
    assert ask_user_input(["a"], _inputs(" 1 "), out) == "1"
    assert out.getvalue() == ""


def test_ask_user_input_repeats_until_valid():
    out = io.StringIO()
    result = ask_user_input(["a", "b"], _inputs("9", "nope", "2"), out)
    assert result == "2"
    assert out.getvalue().count("your input doesn't make sense") == 2
    assert "1)a\n2)b\n" in out.getvalue()


def test_read_write_round_trip(tmp_path):
    path = tmp_path / "log.txt"
    tasks = ["study", "run--TASK COMPLETED", ""]
    write_tasks(path, tasks)
    assert read_tasks(path) == tasks


def test_read_tasks_without_trailing_newline(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("a\nb", encoding="utf-8")
    assert read_tasks(path) == ["a", "b"]


def test_read_tasks_empty_file(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("", encoding="utf-8")
    assert read_tasks(path) == []


def test_read_tasks_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_tasks(tmp_path / "missing.txt")


def test_write_tasks_format(tmp_path):
    path = tmp_path / "log.txt"
    write_tasks(path, ["x", "y"])
    assert path.read_text(encoding="utf-8") == "x\ny\n"


def test_format_activities():
    text = format_activities(["a", "b"])
    assert text == "this is the content of today's activity: \n1)a\n2)b\n"


def test_show_todays_activities_writes_format():
    out = io.StringIO()
    show_todays_activities(["one"], out)
    assert out.getvalue() == format_activities(["one"])


def test_show_tasks_reads_todays_file(tmp_path):
    day = date(2024, 1, 5)
    write_tasks(tmp_path / log_filename(day), ["a", "b"])
    out = io.StringIO()
    waited = []
    tasks = show_tasks(tmp_path, day, out, lambda: waited.append(True))
    assert tasks == ["a", "b"]
    assert waited == [True]
    text = out.getvalue()
    assert text.startswith("these are today's tasks: \n")
    assert "1) a\n2) b\n" in text
    assert text.endswith("press any key to continue...")


def test_show_tasks_missing_file_is_empty(tmp_path):
    out = io.StringIO()
    tasks = show_tasks(tmp_path, date(2024, 1, 5), out, lambda: None)
    assert tasks == []
    assert ")" not in out.getvalue()


def test_complete_task_marks_line():
    result = complete_task(["a", "b"], "2")
    assert result == ["a", "b--TASK COMPLETED"]


def test_complete_task_does_not_mutate_input():
    tasks = ["a"]
    complete_task(tasks, "1")
    assert tasks == ["a"]


def test_complete_task_zero_changes_nothing():
    assert complete_task(["a", "b"], "0") == ["a", "b"]


def test_complete_task_out_of_range():
    with pytest.raises(TaskIndexError):
        complete_task(["a"], "2")


def test_delete_task_removes_line():
    assert delete_task(["a", "b", "c"], "2") == ["a", "c"]


def test_delete_only_task():
    assert delete_task(["a"], "1") == []


def test_delete_task_zero_changes_nothing():
    assert delete_task(["a"], "0") == ["a"]


def test_delete_task_out_of_range():
    with pytest.raises(TaskIndexError):
        delete_task([], "1")


def test_task_index_error_is_index_error():
    with pytest.raises(IndexError):
        delete_task(["a"], "5")


def test_non_numeric_choice_raises_value_error():
    with pytest.raises(ValueError):
        complete_task(["a"], "abc")


def test_log_filename_format():
    assert log_filename(date(2024, 1, 5)) == "log_2024-01-05.txt"


def test_log_filename_defaults_to_today():
    assert log_filename() == log_filename(date.today())