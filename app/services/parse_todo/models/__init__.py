from .parsed_todo import ParsedTodo

__all__ = ["ParsedTodo"]
