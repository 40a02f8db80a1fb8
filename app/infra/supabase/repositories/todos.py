"""Todo repository"""
from typing import List, Optional

from supabase import Client  # type: ignore

from app.models.todo import Todo, TodoCreate, TodoUpdate

from .base import OwnedRepository


class TodoRepository(OwnedRepository[Todo, TodoCreate, TodoUpdate]):
    """Repository for todo operations"""

    def __init__(self, client: Client):
        super().__init__(client, "todos", Todo)

    async def find_by_user(self, user_id: str, limit: Optional[int] = None) -> List[Todo]:
        """All todos of a user, newest first"""
        return await self.find_by_owner(user_id, order_by="created_date", desc=True, limit=limit)

    async def set_completed(self, todo_id: str, user_id: str, completed: bool) -> Optional[Todo]:
        """Set the completed flag of a todo the user owns"""
        return await self.update_owned(todo_id, user_id, TodoUpdate(completed=completed))
