"""Tests for board layout rules and the board page."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from kanban.board import TaskStatus, is_overdue, partition_columns, sort_by_deadline


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _task(name, status=TaskStatus.TODO, deadline=None):
    return SimpleNamespace(name=name, status=status, deadline=deadline)


class TestSortByDeadline:
    def test_ascending_with_undated_last(self):
        tasks = [
            _task("none"),
            _task("late", deadline=NOW + timedelta(days=3)),
            _task("early", deadline=NOW + timedelta(days=1)),
        ]
        assert [t.name for t in sort_by_deadline(tasks)] == ["early", "late", "none"]

    def test_stable_for_equal_keys(self):
        tasks = [_task("a"), _task("b"), _task("c", deadline=NOW), _task("d", deadline=NOW)]
        assert [t.name for t in sort_by_deadline(tasks)] == ["c", "d", "a", "b"]

    def test_mixes_naive_and_aware(self):
        tasks = [
            _task("aware", deadline=NOW + timedelta(hours=1)),
            _task("naive", deadline=datetime(2026, 3, 1, 12, 30)),
        ]
        assert [t.name for t in sort_by_deadline(tasks)] == ["naive", "aware"]


class TestPartitionColumns:
    def test_three_fixed_columns(self):
        columns = partition_columns([])
        assert list(columns) == ["todo", "in_progress", "done"]
        assert all(tasks == [] for tasks in columns.values())

    def test_groups_by_status(self):
        tasks = [
            _task("a", TaskStatus.DONE),
            _task("b", TaskStatus.TODO),
            _task("c", TaskStatus.IN_PROGRESS),
            _task("d", TaskStatus.TODO, deadline=NOW),
        ]
        columns = partition_columns(tasks)
        assert [t.name for t in columns["todo"]] == ["d", "b"]
        assert [t.name for t in columns["in_progress"]] == ["c"]
        assert [t.name for t in columns["done"]] == ["a"]

    def test_unknown_status_dropped(self):
        columns = partition_columns([_task("x", status="blocked")])
        assert sum(len(tasks) for tasks in columns.values()) == 0


class TestIsOverdue:
    def test_past_deadline_not_done(self):
        assert is_overdue(_task("t", deadline=NOW - timedelta(minutes=1)), NOW)

    def test_past_deadline_done(self):
        task = _task("t", TaskStatus.DONE, deadline=NOW - timedelta(days=1))
        assert not is_overdue(task, NOW)

    def test_future_deadline(self):
        assert not is_overdue(_task("t", deadline=NOW + timedelta(days=1)), NOW)

    def test_no_deadline(self):
        assert not is_overdue(_task("t"), NOW)

    def test_defaults_to_current_time(self):
        assert is_overdue(_task("t", TaskStatus.IN_PROGRESS, deadline=datetime(2000, 1, 1)))


class TestBoardPage:
    def test_renders_columns(self, client, db):
        response = client.get("/")
        assert response.status_code == 200
        html = response.get_data(as_text=True)
        for status in ("todo", "in_progress", "done"):
            assert f'id="column-{status}"' in html
            assert f'id="empty-column-{status}"' in html
        assert "new-task-form" in html

    def test_cards_in_their_columns(self, client, make_task):
        todo = make_task("Write docs")
        done = make_task("Ship it", status="done")

        html = client.get("/").get_data(as_text=True)
        assert f'id="task-card-{todo["id"]}"' in html
        assert f'id="task-card-{done["id"]}"' in html
        assert 'id="column-count-todo">1<' in html
        assert 'id="column-count-done">1<' in html
        assert 'id="empty-column-in_progress"' in html

    def test_overdue_flag(self, client, make_task):
        make_task("Late", deadline="2000-01-01T00:00:00+00:00")
        make_task("Late but done", status="done", deadline="2000-01-01T00:00:00+00:00")

        html = client.get("/").get_data(as_text=True)
        assert html.count('class="card status-todo overdue"') == 1
        assert 'class="card status-done"' in html

    def test_status_classes_on_cards(self, client, make_task):
        make_task("Planned")
        make_task("Started", status="in_progress")
        make_task("Finished", status="done")

        html = client.get("/").get_data(as_text=True)
        assert 'class="card status-todo"' in html
        assert 'class="card status-in_progress"' in html
        assert 'class="card status-done"' in html
        assert ".card.status-in_progress { border-left-color: #f59e0b; }" in html

    def test_theme_toggle(self, client, db):
        html = client.get("/").get_data(as_text=True)
        assert 'id="theme-toggle-button"' in html
        assert 'aria-label="Toggle dark mode"' in html
        assert 'localStorage.getItem("darkMode")' in html
        assert "prefers-color-scheme: dark" in html
        assert "body.dark" in html

    def test_accessibility_labels(self, client, db):
        html = client.get("/").get_data(as_text=True)
        for label in ("Task title", "Task description", "Task deadline", "Add task"):
            assert f'aria-label="{label}"' in html

    def test_deadlines_rendered_as_utc(self, client, make_task):
        task = make_task("Offset", deadline="2030-01-01T09:00:00+03:00")

        html = client.get("/").get_data(as_text=True)
        assert f'id="task-card-{task["id"]}"' in html
        assert 'data-deadline="2030-01-01T06:00:00+00:00"' in html
        assert "new Date(localValue).toISOString()" in html


def _column_html(html, status):
    start = html.index(f'id="column-{status}"')
    end = html.find("<section", start)
    return html[start:] if end == -1 else html[start:end]


class TestStatusChangeRoundTrip:
    def test_moved_card_renders_in_new_column(self, client, make_task):
        task = make_task("Drag me")
        card = f'id="task-card-{task["id"]}"'
        assert card in _column_html(client.get("/").get_data(as_text=True), "todo")

        response = client.put(f"/api/tasks/{task['id']}", json={**task, "status": "done"})
        assert response.status_code == 204

        html = client.get("/").get_data(as_text=True)
        assert card in _column_html(html, "done")
        assert card not in _column_html(html, "todo")
        assert 'id="column-count-done">1<' in html
        assert 'id="empty-column-todo"' in html

    def test_moved_task_partitioned_into_new_column(self, app, client, make_task):
        task = make_task("Drag me too", status="in_progress")
        client.put(f"/api/tasks/{task['id']}", json={**task, "status": "done"})

        from kanban.services import tasks as task_store

        with app.app_context():
            columns = partition_columns(task_store.list_tasks())
        assert [str(t.id) for t in columns["done"]] == [task["id"]]
        assert columns["in_progress"] == []
