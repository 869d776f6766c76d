from datetime import datetime

from pomodoro_todo.core.models import UNSET, Priority, TodoFilter, TodoPatch


class TestTodoPatch:
    def test_empty_patch_has_no_changes(self):
        patch = TodoPatch()
        assert patch.is_empty()
        assert patch.changes() == {}
        assert patch.title is UNSET

    def test_changes_only_lists_provided_fields(self):
        patch = TodoPatch(completed=True, due_date=None)
        assert patch.changes() == {"completed": True, "due_date": None}

    def test_apply_replaces_only_provided_fields(self, make_todo):
        todo = make_todo(priority="high", due_in_days=3, category="Work")
        now = datetime(2026, 4, 1)

        updated = TodoPatch(completed=True).apply(todo, now)

        assert updated.completed is True
        assert updated.updated_at == now
        assert updated.title == todo.title
        assert updated.priority is Priority.HIGH
        assert updated.category == "Work"
        assert updated.due_date == todo.due_date
        assert updated.created_at == todo.created_at
        assert todo.completed is False

    def test_apply_can_clear_due_date(self, make_todo):
        todo = make_todo(due_in_days=3)
        updated = TodoPatch(due_date=None).apply(todo, datetime(2026, 4, 1))
        assert updated.due_date is None

    def test_apply_empty_patch_keeps_timestamp(self, make_todo):
        todo = make_todo()
        updated = TodoPatch().apply(todo, datetime(2030, 1, 1))
        assert updated == todo
        assert updated is not todo


class TestTodoFilter:
    def test_empty_filter_matches_everything(self, make_todo):
        assert TodoFilter().matches(make_todo())
        assert TodoFilter().matches(make_todo(completed=True, priority="low"))

    def test_category_is_case_insensitive(self, make_todo):
        todo = make_todo(category="Work")
        assert TodoFilter(category="work").matches(todo)
        assert TodoFilter(category="WORK").matches(todo)
        assert not TodoFilter(category="Health").matches(todo)

    def test_filters_combine_with_and(self, make_todo):
        todo = make_todo(priority="high", completed=True, category="Work")
        assert TodoFilter(priority=Priority.HIGH, completed=True).matches(todo)
        assert not TodoFilter(priority=Priority.HIGH, completed=False).matches(todo)
        assert not TodoFilter(priority=Priority.LOW, completed=True).matches(todo)

    def test_active_count(self):
        assert TodoFilter().active_count == 0
        assert TodoFilter(category="Work", completed=False).active_count == 2


def test_priority_rank_orders_levels():
    assert Priority.HIGH.rank > Priority.MEDIUM.rank > Priority.LOW.rank
