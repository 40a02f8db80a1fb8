"""Natural-language todo parsing module"""
from .parse_todo_service import ParseTodoError, parse_todo
from .models import ParsedTodo
from .prompts import prompt_template

__all__ = [
    "parse_todo",
    "ParseTodoError",
    "ParsedTodo",
    "prompt_template",
]
