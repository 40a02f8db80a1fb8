"""Todo list state owned by a single view"""
import logging
from datetime import datetime
from typing import List, Optional

from app.infra.supabase.repositories.todos import TodoRepository
from app.models.todo import Todo, TodoCreate, TodoInput, TodoUpdate
from app.utils.datetime_helper import to_utc
from .todo_view import TodoViewOptions, filter_and_sort

logger = logging.getLogger(__name__)


class TodoBoard:
    """
    The in-memory todo list of one user.

    The list is replaced wholesale by refresh() and patched locally by
    mutations. All remote calls are scoped to the board's user.
    """

    def __init__(self, repository: TodoRepository, user_id: str):
        self._repo = repository
        self.user_id = user_id
        self.todos: List[Todo] = []

    async def refresh(self) -> List[Todo]:
        """Re-fetch the authoritative list, newest first"""
        self.todos = await self._repo.find_by_user(self.user_id)
        return self.todos

    def get(self, todo_id: str) -> Optional[Todo]:
        return next((t for t in self.todos if t.id == todo_id), None)

    def view(self, options: TodoViewOptions, now: Optional[datetime] = None) -> List[Todo]:
        return filter_and_sort(self.todos, options, now)

    async def add(self, data: TodoInput) -> Todo:
        """Create a todo for the board's user, then re-sync"""
        todo = await self._repo.create(TodoCreate(
            user_id=self.user_id,
            title=data.title,
            description=data.description,
            due_date=to_utc(data.due_date),
            priority=data.priority,
            category=data.category,
            completed=False,
        ))
        logger.info(f"Todo created: {todo.id} - {todo.title} (user: {self.user_id})")
        await self.refresh()
        return todo

    async def edit(self, todo_id: str, data: TodoInput) -> Optional[Todo]:
        """Replace the editable fields; None when the todo is missing or not owned"""
        todo = await self._repo.update_owned(todo_id, self.user_id, TodoUpdate(
            title=data.title,
            description=data.description,
            due_date=to_utc(data.due_date),
            priority=data.priority,
            category=data.category,
        ))
        if todo is None:
            return None
        await self.refresh()
        return todo

    async def toggle_complete(self, todo_id: str) -> Optional[Todo]:
        """
        Flip the completed flag.

        The local copy is flipped before the remote call. If the call fails
        the list is re-fetched and the error re-raised; if the store reports
        no matching row the list is re-fetched and None is returned.
        """
        current = self.get(todo_id)
        if current is None:
            return None

        completed = not current.completed
        self._replace(current.model_copy(update={"completed": completed}))

        try:
            updated = await self._repo.set_completed(todo_id, self.user_id, completed)
        except Exception as e:
            logger.error(f"Failed to toggle todo {todo_id}: {e}")
            await self.refresh()
            raise

        if updated is None:
            await self.refresh()
            return None

        self._replace(updated)
        return updated

    async def remove(self, todo_id: str) -> bool:
        """Delete remotely, then drop the local copy"""
        deleted = await self._repo.delete_owned(todo_id, self.user_id)
        if deleted:
            self.todos = [t for t in self.todos if t.id != todo_id]
            logger.info(f"Todo deleted: {todo_id} (user: {self.user_id})")
        return deleted

    def _replace(self, todo: Todo) -> None:
        self.todos = [todo if t.id == todo.id else t for t in self.todos]
