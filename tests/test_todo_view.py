"""Tests for in-memory filtering, searching and sorting of todos"""
from datetime import datetime, timedelta, timezone
from itertools import permutations

import pytest

from app.models.todo import TodoPriority, TodoStatus
from app.services.todo_view import (
    TodoSortKey,
    TodoViewOptions,
    filter_and_sort,
    sort_todos,
    todo_status,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestTodoStatus:

    @pytest.mark.parametrize("completed", [True, False])
    @pytest.mark.parametrize("due_offset", [None, -timedelta(days=1), timedelta(0), timedelta(days=1)])
    def test_exactly_one_bucket(self, make_todo, completed, due_offset):
        due = NOW + due_offset if due_offset is not None else None
        todo = make_todo(completed=completed, due_date=due)

        buckets = [
            status for status in TodoStatus
            if filter_and_sort([todo], TodoViewOptions(status=status), now=NOW)
        ]

        assert buckets == [todo_status(todo, NOW)]

    def test_completed_wins_over_past_due(self, make_todo):
        todo = make_todo(completed=True, due_date=NOW - timedelta(days=3))
        assert todo_status(todo, NOW) == TodoStatus.COMPLETED

    def test_past_due_is_overdue(self, make_todo):
        todo = make_todo(due_date=NOW - timedelta(minutes=1))
        assert todo_status(todo, NOW) == TodoStatus.OVERDUE

    def test_due_now_is_still_in_progress(self, make_todo):
        todo = make_todo(due_date=NOW)
        assert todo_status(todo, NOW) == TodoStatus.IN_PROGRESS

    def test_no_due_date_is_never_overdue(self, make_todo):
        todo = make_todo(due_date=None)
        assert todo_status(todo, NOW + timedelta(days=3650)) == TodoStatus.IN_PROGRESS

    def test_naive_due_date_is_read_as_kst(self, make_todo):
        # 2024-06-01 20:00 KST == 11:00 UTC, one hour before NOW
        todo = make_todo(due_date=datetime(2024, 6, 1, 20, 0))
        assert todo_status(todo, NOW) == TodoStatus.OVERDUE


class TestFilters:

    def test_search_is_case_insensitive_on_title_only(self, make_todo):
        hit = make_todo(title="Write REPORT draft")
        by_description = make_todo(title="Lunch", description="report")
        miss = make_todo(title="Gym")

        result = filter_and_sort([hit, by_description, miss], TodoViewOptions(search="report"))

        assert result == [hit]

    def test_blank_search_keeps_everything(self, make_todo):
        todos = [make_todo(), make_todo()]
        assert len(filter_and_sort(todos, TodoViewOptions(search="   "))) == 2

    def test_priority_filter_excludes_missing_priority(self, make_todo):
        high = make_todo(priority=TodoPriority.HIGH)
        unset = make_todo(priority=None)
        low = make_todo(priority=TodoPriority.LOW)

        assert filter_and_sort([high, unset, low], TodoViewOptions(priority=TodoPriority.HIGH)) == [high]
        assert filter_and_sort([high, unset, low], TodoViewOptions(priority=TodoPriority.LOW)) == [low]

    def test_filters_compose_with_and(self, make_todo):
        match = make_todo(title="팀 회의", priority=TodoPriority.HIGH, due_date=NOW - timedelta(hours=1))
        wrong_priority = make_todo(title="팀 회의 2", priority=TodoPriority.LOW, due_date=NOW - timedelta(hours=1))
        wrong_status = make_todo(title="팀 회의 3", priority=TodoPriority.HIGH, completed=True)
        wrong_title = make_todo(title="운동", priority=TodoPriority.HIGH, due_date=NOW - timedelta(hours=1))

        options = TodoViewOptions(search="회의", status=TodoStatus.OVERDUE, priority=TodoPriority.HIGH)
        result = filter_and_sort([match, wrong_priority, wrong_status, wrong_title], options, now=NOW)

        assert result == [match]

    def test_input_list_is_not_modified(self, make_todo):
        todos = [make_todo(), make_todo()]
        before = list(todos)
        filter_and_sort(todos, TodoViewOptions(sort_by=TodoSortKey.TITLE))
        assert todos == before


class TestSorting:

    def test_default_sort_is_newest_first(self, make_todo):
        older = make_todo(created_date=NOW - timedelta(days=2))
        newer = make_todo(created_date=NOW)

        assert filter_and_sort([older, newer], TodoViewOptions()) == [newer, older]

    def test_priority_sort_high_to_low(self, make_todo):
        low = make_todo(priority=TodoPriority.LOW)
        high = make_todo(priority=TodoPriority.HIGH)
        medium = make_todo(priority=TodoPriority.MEDIUM)

        assert sort_todos([low, high, medium], TodoSortKey.PRIORITY) == [high, medium, low]

    def test_undated_todos_always_last_for_due_date_sort(self, make_todo):
        todos = [
            make_todo(due_date=NOW + timedelta(days=2)),
            make_todo(due_date=None),
            make_todo(due_date=NOW - timedelta(days=1)),
            make_todo(due_date=None),
        ]

        for ordering in permutations(todos):
            result = sort_todos(ordering, TodoSortKey.DUE_DATE)
            assert [t.due_date is None for t in result] == [False, False, True, True]
            assert result[0].due_date < result[1].due_date

    def test_title_sort(self, make_todo):
        b = make_todo(title="banana")
        a = make_todo(title="Apple")
        c = make_todo(title="cherry")

        assert sort_todos([b, c, a], TodoSortKey.TITLE) == [a, b, c]

    def test_title_sort_ignores_accents(self, make_todo):
        banana = make_todo(title="banana")
        cherry = make_todo(title="cherry")
        apple = make_todo(title="ápple")
        eclair = make_todo(title="Éclair")

        result = sort_todos([banana, cherry, eclair, apple], TodoSortKey.TITLE)

        assert [t.title for t in result] == ["ápple", "banana", "cherry", "Éclair"]

    def test_title_sort_keeps_hangul_order(self, make_todo):
        titles = ["회의", "가계부", "나무", "apple"]
        todos = [make_todo(title=t) for t in titles]

        result = sort_todos(todos, TodoSortKey.TITLE)

        assert [t.title for t in result] == ["apple", "가계부", "나무", "회의"]
