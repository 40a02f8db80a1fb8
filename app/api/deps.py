"""Shared FastAPI dependencies"""
from app.infra.supabase.client import get_supabase_client
from app.infra.supabase.repositories.todos import TodoRepository
from app.services.auth_service import AuthService


def get_todo_repository() -> TodoRepository:
    return TodoRepository(get_supabase_client())


def get_auth_service() -> AuthService:
    return AuthService()
