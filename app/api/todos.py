from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import Any, List, Optional
import logging

from app.api.deps import get_todo_repository
from app.infra.supabase.repositories.todos import TodoRepository
from app.middleware.auth import get_current_user_id
from app.models.todo import Todo, TodoInput, TodoPriority, TodoStatus
from app.services.parse_todo import ParseTodoError, parse_todo
from app.services.todo_board import TodoBoard
from app.services.todo_view import TodoSortKey, TodoViewOptions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/todos", tags=["todos"])


class AITodoRequest(BaseModel):
    input: Optional[Any] = None


class TodoResponse(BaseModel):
    todo: Todo


class TodoListResponse(BaseModel):
    todos: List[Todo]
    count: int


class DeleteResponse(BaseModel):
    success: bool
    message: str


def get_board(
    user_id: str = Depends(get_current_user_id),
    repo: TodoRepository = Depends(get_todo_repository),
) -> TodoBoard:
    return TodoBoard(repo, user_id)


async def _load(board: TodoBoard) -> None:
    try:
        await board.refresh()
    except Exception as e:
        logger.error(f"할 일 조회 실패 (user: {board.user_id}): {e}")
        raise HTTPException(status_code=500, detail="할 일 목록을 불러오는 중 오류가 발생했습니다.")


@router.get("", response_model=TodoListResponse)
async def list_todos(
    search: Optional[str] = None,
    status: Optional[TodoStatus] = None,
    priority: Optional[TodoPriority] = None,
    sort_by: TodoSortKey = TodoSortKey.CREATED_DATE,
    board: TodoBoard = Depends(get_board),
):
    """List the caller's todos with search, status / priority filters and sorting"""
    await _load(board)
    todos = board.view(TodoViewOptions(search=search, status=status, priority=priority, sort_by=sort_by))
    return {"todos": todos, "count": len(todos)}


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: TodoRepository = Depends(get_todo_repository),
):
    """Get a single todo owned by the caller"""
    todo = await repo.find_owned(todo_id, user_id)
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return {"todo": todo}


@router.post("", response_model=TodoResponse)
async def create_todo(request: TodoInput, board: TodoBoard = Depends(get_board)):
    """Create a todo for the caller"""
    try:
        todo = await board.add(request)
    except Exception as e:
        logger.error(f"할 일 저장 실패: {e}")
        raise HTTPException(status_code=500, detail="할 일을 저장하는 중 오류가 발생했습니다.")
    return {"todo": todo}


@router.post("/ai", response_model=TodoResponse)
async def create_todo_from_text(request: AITodoRequest, board: TodoBoard = Depends(get_board)):
    """Parse natural-language input with AI and save the result immediately"""
    try:
        parsed = await parse_todo(request.input)
    except ParseTodoError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    try:
        todo = await board.add(parsed.to_todo_input())
    except Exception as e:
        logger.error(f"할 일 저장 실패: {e}")
        raise HTTPException(status_code=500, detail="할 일을 저장하는 중 오류가 발생했습니다.")
    return {"todo": todo}


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(todo_id: str, request: TodoInput, board: TodoBoard = Depends(get_board)):
    """Replace the editable fields of a todo owned by the caller"""
    try:
        todo = await board.edit(todo_id, request)
    except Exception as e:
        logger.error(f"할 일 저장 실패: {e}")
        raise HTTPException(status_code=500, detail="할 일을 저장하는 중 오류가 발생했습니다.")

    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return {"todo": todo}


@router.post("/{todo_id}/toggle", response_model=TodoResponse)
async def toggle_todo(todo_id: str, board: TodoBoard = Depends(get_board)):
    """Flip the completed flag of a todo owned by the caller"""
    await _load(board)
    try:
        todo = await board.toggle_complete(todo_id)
    except Exception:
        raise HTTPException(status_code=500, detail="할 일 상태를 변경하는 중 오류가 발생했습니다.")

    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return {"todo": todo}


@router.delete("/{todo_id}", response_model=DeleteResponse)
async def delete_todo(todo_id: str, board: TodoBoard = Depends(get_board)):
    """Delete a todo owned by the caller"""
    try:
        success = await board.remove(todo_id)
    except Exception as e:
        logger.error(f"할 일 삭제 실패: {e}")
        raise HTTPException(status_code=500, detail="할 일을 삭제하는 중 오류가 발생했습니다.")

    if not success:
        raise HTTPException(status_code=404, detail="Todo not found")
    return {"success": True, "message": "Todo deleted successfully"}
