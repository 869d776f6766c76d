from pomodoro_todo.core.models import NewTodo, Priority, TodoFilter, TodoPatch


def test_create_assigns_id_and_timestamps(store):
    todo = store.create(NewTodo(title="Write report"))

    assert todo.id == "1"
    assert todo.created_at == todo.updated_at
    assert todo.priority is Priority.MEDIUM
    assert todo.category == "General"
    assert store.get(todo.id) == todo


def test_ids_are_unique(store):
    ids = {store.create(NewTodo(title=f"t{i}")).id for i in range(5)}
    assert len(ids) == 5


def test_list_is_newest_first(store):
    first = store.create(NewTodo(title="first"))
    second = store.create(NewTodo(title="second"))
    third = store.create(NewTodo(title="third"))

    assert [t.id for t in store.list()] == [third.id, second.id, first.id]


def test_list_applies_filter(store):
    store.create(NewTodo(title="a", priority=Priority.HIGH, category="Work"))
    store.create(NewTodo(title="b", priority=Priority.HIGH, category="Home", completed=True))
    store.create(NewTodo(title="c", priority=Priority.LOW, category="work"))

    high = store.list(TodoFilter(priority=Priority.HIGH))
    work = store.list(TodoFilter(category="WORK"))
    open_high = store.list(TodoFilter(priority=Priority.HIGH, completed=False))

    assert {t.title for t in high} == {"a", "b"}
    assert {t.title for t in work} == {"a", "c"}
    assert [t.title for t in open_high] == ["a"]


def test_returned_records_are_copies(store):
    todo = store.create(NewTodo(title="original"))
    todo.title = "mutated"
    store.list()[0].title = "mutated again"

    assert store.get(todo.id).title == "original"


def test_update_missing_returns_none(store):
    assert store.update("42", TodoPatch(completed=True)) is None


def test_update_applies_patch(store):
    todo = store.create(NewTodo(title="draft", description="notes"))

    updated = store.update(todo.id, TodoPatch(title="final", priority=Priority.HIGH))

    assert updated.title == "final"
    assert updated.priority is Priority.HIGH
    assert updated.description == "notes"
    assert updated.updated_at >= todo.updated_at
    assert store.get(todo.id) == updated


def test_delete_returns_removed_record(store):
    todo = store.create(NewTodo(title="bye"))

    assert store.delete(todo.id) == todo
    assert store.get(todo.id) is None
    assert store.delete(todo.id) is None


def test_seed_samples(store):
    store.seed_samples()

    todos = store.list()
    assert [t.title for t in todos] == [
        "Work with Pomodoro Technique",
        "Prepare shopping list",
        "Yoga class",
    ]
    assert {t.category for t in todos} == {"Work", "Personal", "Health"}
    assert sum(t.completed for t in todos) == 1
