from .parse_todo_prompt import prompt_template

__all__ = ["prompt_template"]
