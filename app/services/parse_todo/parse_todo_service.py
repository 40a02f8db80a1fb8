"""Natural-language todo parsing with LangChain + Gemini"""
import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, Optional

from langchain_google_genai import ChatGoogleGenerativeAI

from app.config import PARSE_TODO_MODEL, get_google_api_key
from app.utils.datetime_helper import format_datetime_ko, now_kst, to_kst
from .keywords import normalize_parsed_todo
from .model_diagnostics import log_available_models
from .models import ParsedTodo
from .prompts import prompt_template

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "입력된 텍스트가 올바르지 않습니다."
EMPTY_INPUT_MESSAGE = "할 일 내용을 입력해주세요."
NOT_CONFIGURED_MESSAGE = "AI 서비스가 설정되지 않았습니다."
PARSE_FAILED_MESSAGE = "할 일 파싱 중 오류가 발생했습니다."


class ParseTodoError(Exception):
    """Parsing failure carrying the HTTP status and the user-facing message"""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def validate_input(value: Any) -> str:
    """Reject missing / non-string (400) and blank (400) input"""
    if not value or not isinstance(value, str):
        raise ParseTodoError(INVALID_INPUT_MESSAGE, status_code=400)
    if not value.strip():
        raise ParseTodoError(EMPTY_INPUT_MESSAGE, status_code=400)
    return value


@lru_cache(maxsize=4)
def get_structured_llm(model: str, api_key: str):
    """Gemini with structured output, one instance per (model, key)"""
    # max_retries=1 is a single attempt; 0 would fall back to the SDK default
    llm = ChatGoogleGenerativeAI(model=model, temperature=0, google_api_key=api_key, max_retries=1)
    return llm.with_structured_output(ParsedTodo)


def _is_model_not_found(error: BaseException) -> bool:
    current: Optional[BaseException] = error
    while current is not None:
        if getattr(current, "status_code", None) == 404 or getattr(current, "code", None) == 404:
            return True
        current = current.__cause__
    message = str(error).lower()
    return "404" in message and "model" in message


async def parse_todo(text: Any, now: Optional[datetime] = None) -> ParsedTodo:
    """
    자연어 입력을 구조화된 할 일로 변환한다

    Args:
        text: 사용자가 입력한 자연어 텍스트
        now: 상대 날짜 계산 기준 시각 (없으면 현재 KST)

    Returns:
        정규화된 ParsedTodo

    Raises:
        ParseTodoError: 400 (잘못된 입력), 500 (인증 정보 없음 / 모델 호출 실패)
    """
    text = validate_input(text)

    api_key = get_google_api_key()
    if not api_key:
        logger.error("GOOGLE_API_KEY is not set")
        raise ParseTodoError(NOT_CONFIGURED_MESSAGE, status_code=500)

    current = to_kst(now) if now else now_kst()

    try:
        result = await (prompt_template | get_structured_llm(PARSE_TODO_MODEL, api_key)).ainvoke({
            "today": current.date().isoformat(),
            "current_time": current.strftime("%H:%M"),
            "current_datetime": format_datetime_ko(current),
            "input": text,
        })
    except Exception as e:
        logger.error(f"Parse todo error: {e}")
        if _is_model_not_found(e):
            await log_available_models(api_key)
        raise ParseTodoError(PARSE_FAILED_MESSAGE, status_code=500) from e

    if result is None:
        logger.error("Model returned no structured output")
        raise ParseTodoError(PARSE_FAILED_MESSAGE, status_code=500)

    if isinstance(result, dict):
        result = ParsedTodo.model_validate(result)

    parsed = normalize_parsed_todo(result, text)
    logger.info(f"Parsed todo: {parsed.title} (due {parsed.due_date} {parsed.due_time}, {parsed.priority.value})")
    return parsed
