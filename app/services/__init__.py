"""Services module"""
from app.services.auth_service import AuthError, AuthService
from app.services.parse_todo import ParseTodoError, ParsedTodo, parse_todo
from app.services.todo_board import TodoBoard
from app.services.todo_view import TodoSortKey, TodoViewOptions, filter_and_sort, todo_status

__all__ = [
    "AuthService",
    "AuthError",
    "parse_todo",
    "ParseTodoError",
    "ParsedTodo",
    "TodoBoard",
    "TodoViewOptions",
    "TodoSortKey",
    "filter_and_sort",
    "todo_status",
]
