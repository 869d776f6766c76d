"""Tests for the display ordering of todos."""

from datetime import datetime, timedelta, timezone

from pomodoro_todo.core.sorting import is_overdue, sort_for_display


def titles(todos):
    return [t.title for t in todos]


def test_priority_descending_without_due_dates(make_todo):
    todos = [
        make_todo(priority="low", title="low"),
        make_todo(priority="high", title="high"),
        make_todo(priority="medium", title="medium"),
    ]
    assert titles(sort_for_display(todos)) == ["high", "medium", "low"]


def test_completed_high_priority_goes_after_incomplete(make_todo):
    todos = [
        make_todo(priority="high", completed=True, title="done-high"),
        make_todo(priority="low", title="open-low"),
        make_todo(priority="medium", title="open-medium"),
    ]
    assert titles(sort_for_display(todos)) == ["open-medium", "open-low", "done-high"]


def test_due_date_ascending_and_missing_last(make_todo):
    todos = [
        make_todo(title="no-due"),
        make_todo(due_in_days=5, title="due-5"),
        make_todo(due_in_days=1, title="due-1"),
    ]
    assert titles(sort_for_display(todos)) == ["due-1", "due-5", "no-due"]


def test_creation_date_descending_breaks_ties(make_todo):
    todos = [
        make_todo(created_minutes_ago=30, title="older"),
        make_todo(created_minutes_ago=1, title="newer"),
        make_todo(created_minutes_ago=10, title="middle"),
    ]
    assert titles(sort_for_display(todos)) == ["newer", "middle", "older"]


def test_completed_items_are_ordered_among_themselves(make_todo):
    todos = [
        make_todo(priority="low", completed=True, title="done-low"),
        make_todo(priority="high", completed=True, title="done-high"),
        make_todo(title="open"),
    ]
    assert titles(sort_for_display(todos)) == ["open", "done-high", "done-low"]


def test_sort_does_not_mutate_input_and_is_deterministic(make_todo):
    todos = [make_todo(priority="low"), make_todo(priority="high"), make_todo(due_in_days=2)]
    original = list(todos)

    first = sort_for_display(todos)
    second = sort_for_display(reversed(todos))

    assert todos == original
    assert [t.id for t in first] == [t.id for t in second]


def test_is_overdue(make_todo):
    now = datetime(2026, 3, 10)
    past = make_todo(due_in_days=1)
    future = make_todo(due_in_days=30)
    done = make_todo(due_in_days=1, completed=True)
    undated = make_todo()

    assert is_overdue(past, now)
    assert not is_overdue(future, now)
    assert not is_overdue(done, now)
    assert not is_overdue(undated, now)
    assert not is_overdue(past, past.due_date - timedelta(seconds=1))


def test_is_overdue_with_aware_due_date_and_naive_now(make_todo):
    past = make_todo(due_date=datetime(2000, 1, 1, tzinfo=timezone.utc))
    future = make_todo(due_date=datetime(2099, 1, 1, tzinfo=timezone.utc))

    assert is_overdue(past, datetime(2026, 1, 1))
    assert not is_overdue(future, datetime(2026, 1, 1))
    assert is_overdue(past)


def test_sort_mixes_aware_and_naive_due_dates(make_todo):
    todos = [
        make_todo(title="later", due_date=datetime(2099, 1, 1)),
        make_todo(title="sooner", due_date=datetime(2030, 1, 1, tzinfo=timezone.utc)),
    ]
    assert titles(sort_for_display(todos)) == ["sooner", "later"]
