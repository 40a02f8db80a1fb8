# API module exports
from app.api import auth, health, parse_todo, todos
from app.api.base import api_router

__all__ = ["auth", "health", "parse_todo", "todos", "api_router"]
