"""In-memory filter / sort / search over a user's todo list"""
import unicodedata
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel

from app.models.todo import Todo, TodoPriority, TodoStatus
from app.utils.datetime_helper import ensure_aware


class TodoSortKey(str, Enum):
    PRIORITY = "priority"
    DUE_DATE = "due_date"
    CREATED_DATE = "created_date"
    TITLE = "title"


PRIORITY_RANK = {
    TodoPriority.HIGH: 3,
    TodoPriority.MEDIUM: 2,
    TodoPriority.LOW: 1,
}


class TodoViewOptions(BaseModel):
    """None on a filter means "all" (전체)"""
    search: Optional[str] = None
    status: Optional[TodoStatus] = None
    priority: Optional[TodoPriority] = None
    sort_by: TodoSortKey = TodoSortKey.CREATED_DATE


def todo_status(todo: Todo, now: datetime) -> TodoStatus:
    """The single status bucket a todo falls in at `now`; no due date means never overdue"""
    if todo.completed:
        return TodoStatus.COMPLETED
    if todo.due_date is not None and ensure_aware(todo.due_date) < ensure_aware(now):
        return TodoStatus.OVERDUE
    return TodoStatus.IN_PROGRESS


def _fold(title: str) -> str:
    """Case- and accent-insensitive collation form ('Ápple' -> 'apple')"""
    decomposed = unicodedata.normalize("NFD", title.casefold())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return unicodedata.normalize("NFC", stripped)


def _title_key(todo: Todo):
    # ties broken by case-folded, then raw title so the order is total
    return (_fold(todo.title), todo.title.casefold(), todo.title)


def sort_todos(todos: Iterable[Todo], sort_by: TodoSortKey) -> List[Todo]:
    """Stable sort; todos without a due date always go last for DUE_DATE"""
    todos = list(todos)

    if sort_by == TodoSortKey.PRIORITY:
        # missing priority ranks with low
        return sorted(todos, key=lambda t: PRIORITY_RANK.get(t.priority, 1), reverse=True)

    if sort_by == TodoSortKey.DUE_DATE:
        dated = [t for t in todos if t.due_date is not None]
        undated = [t for t in todos if t.due_date is None]
        return sorted(dated, key=lambda t: ensure_aware(t.due_date)) + undated

    if sort_by == TodoSortKey.TITLE:
        return sorted(todos, key=_title_key)

    return sorted(todos, key=lambda t: ensure_aware(t.created_date), reverse=True)


def filter_and_sort(todos: Iterable[Todo], options: TodoViewOptions, now: Optional[datetime] = None) -> List[Todo]:
    """
    Apply search, status and priority filters (AND), then sort.

    Args:
        todos: the user's full list
        options: filter and sort configuration
        now: reference time for status buckets, defaults to the current time

    Returns:
        A new list; the input is left untouched
    """
    now = now or datetime.now(timezone.utc)
    result = list(todos)

    if options.search and options.search.strip():
        query = options.search.strip().casefold()
        result = [t for t in result if query in t.title.casefold()]

    if options.status is not None:
        result = [t for t in result if todo_status(t, now) == options.status]

    if options.priority is not None:
        result = [t for t in result if t.priority == options.priority]

    return sort_todos(result, options.sort_by)
