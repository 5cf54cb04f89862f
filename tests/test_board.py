import httpx
import pytest

from tasktracker.client.board import FALLBACK_NEXT_TASK, BoardView, TaskBoard, progress_percent
from tasktracker.client.http import Task, TaskApiClient


@pytest.fixture()
def board(client):
    return TaskBoard(TaskApiClient(client=client))


def offline_board(handler) -> TaskBoard:
    transport = httpx.MockTransport(handler)
    return TaskBoard(TaskApiClient(client=httpx.Client(transport=transport, base_url="http://testserver")))


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


class TestProgress:
    def test_empty_list_is_zero(self):
        assert progress_percent(0, 0) == 0

    @pytest.mark.parametrize(
        "completed,total,expected",
        [(1, 3, 33), (2, 3, 67), (1, 8, 13), (1, 2, 50), (3, 3, 100)],
    )
    def test_rounds_half_up(self, completed, total, expected):
        assert progress_percent(completed, total) == expected


class TestBoardView:
    tasks = [
        Task(id=1, title="Done thing", completed=True),
        Task(id=2, title="Next thing", completed=False),
        Task(id=3, title="Later thing", completed=False),
    ]

    def test_counts_and_suggestion(self):
        view = BoardView.build(self.tasks, "All")
        assert view.total == 3
        assert view.completed_count == 1
        assert view.active_count == 2
        assert view.progress == 33
        assert view.next_task == "Next thing"
        assert [t.id for t in view.visible] == [1, 2, 3]
        assert view.summary == "Based on your tasks, focus on Next thing first. You're 33% done. Keep it up!"

    def test_filters(self):
        assert [t.id for t in BoardView.build(self.tasks, "Active").visible] == [2, 3]
        assert [t.id for t in BoardView.build(self.tasks, "Completed").visible] == [1]

    def test_all_done_uses_fallback(self):
        done = [Task(id=1, title="Only", completed=True)]
        view = BoardView.build(done, "All")
        assert view.next_task == FALLBACK_NEXT_TASK
        assert view.progress == 100


    def test_blank_pending_title_uses_fallback(self):
        tasks = [Task(id=1, title="Done", completed=True), Task(id=2, title="", completed=False)]
        view = BoardView.build(tasks, "All")
        assert view.next_task == FALLBACK_NEXT_TASK
        assert "focus on your pending task first" in view.summary

    def test_empty(self):
        view = BoardView.build([], "All")
        assert view.progress == 0
        assert view.visible == []
        assert view.next_task == FALLBACK_NEXT_TASK


class TestTaskBoard:
    def test_add_toggle_filter_example(self, board):
        board.fetch()
        assert board.tasks == []

        board.title = "Buy milk"
        assert board.add() is True
        assert board.title == ""
        assert board.message == "Task saved. Keep going!"
        assert board.tasks == [Task(id=1, title="Buy milk", completed=False)]

        assert board.toggle(board.tasks[0]) is True
        assert board.tasks == [Task(id=1, title="Buy milk", completed=True)]

        board.set_filter("Active")
        view = board.view()
        assert view.visible == []
        assert view.total == 1

    def test_toggle_twice_restores(self, board):
        board.title = "Flip"
        board.add()
        board.toggle(board.tasks[0])
        board.toggle(board.tasks[0])
        assert board.tasks[0].completed is False

    def test_blank_title_makes_no_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(201, json={"id": 1, "title": "x", "completed": False})

        b = offline_board(handler)
        b.title = "   "
        assert b.add() is False
        assert calls == []
        assert b.title == "   "

    def test_delete_refetches(self, board):
        for title in ("One", "Two"):
            board.title = title
            board.add()
        assert board.delete(board.tasks[0].id) is True
        assert [t.title for t in board.tasks] == ["Two"]

    def test_delete_missing_reports_failure(self, board):
        assert board.delete(12345) is False
        assert board.message == "Could not delete task"

    def test_add_server_error_keeps_title(self):
        b = offline_board(lambda request: httpx.Response(500, text="boom"))
        b.title = "Important"
        assert b.add() is False
        assert b.title == "Important"
        assert b.message == "Could not save task (500)"

    def test_add_network_error(self):
        b = offline_board(refuse)
        b.title = "Important"
        assert b.add() is False
        assert b.title == "Important"
        assert b.message == "Could not save task (network)"

    def test_fetch_failure_keeps_snapshot(self):
        b = offline_board(refuse)
        b.tasks = [Task(id=1, title="Cached", completed=False)]
        assert b.fetch() is False
        assert b.message == "Could not load tasks"
        assert b.tasks == [Task(id=1, title="Cached", completed=False)]

    def test_fetch_bad_body(self):
        b = offline_board(lambda request: httpx.Response(200, text="not json"))
        assert b.fetch() is False
        assert b.tasks == []
        assert b.message == "Could not load tasks"

    def test_fetch_non_list_is_empty(self):
        b = offline_board(lambda request: httpx.Response(200, json={"items": []}))
        b.tasks = [Task(id=1, title="Stale", completed=False)]
        assert b.fetch() is True
        assert b.tasks == []

    def test_set_filter(self, board):
        board.set_filter("completed")
        assert board.filter == "Completed"
        with pytest.raises(ValueError):
            board.set_filter("someday")
        assert board.filter == "Completed"

    def test_fetch_rejects_non_boolean_completed(self):
        b = offline_board(lambda request: httpx.Response(200, json=[{"id": 1, "title": "Odd", "completed": "false"}]))
        assert b.fetch() is False
        assert b.tasks == []
        assert b.message == "Could not load tasks"
