import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.services.parse_todo import ParseTodoError, ParsedTodo, parse_todo
from app.services.parse_todo.parse_todo_service import INVALID_INPUT_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/parse-todo", tags=["parse-todo"])


@router.post("", response_model=ParsedTodo, response_model_exclude_none=True)
async def parse_todo_endpoint(request: Request):
    """
    자연어 할 일을 구조화된 데이터로 변환 (저장하지 않음)

    Body: {"input": "내일 오전 10시에 팀 회의 준비"}
    Errors: 400 / 500 with {"error": "..."}
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(status_code=400, content={"error": INVALID_INPUT_MESSAGE})

    text = body.get("input") if isinstance(body, dict) else None

    try:
        return await parse_todo(text)
    except ParseTodoError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
