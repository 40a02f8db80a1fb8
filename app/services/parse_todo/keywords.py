"""Keyword rules applied on top of the model output.

The prompt asks the model for the same rules; re-applying them here keeps
the result stable when the model drifts.
"""
import re
from datetime import date
from typing import Dict, List, Optional, Tuple

from app.models.todo import TodoCategory, TodoPriority

from .models import ParsedTodo

DEFAULT_DUE_TIME = "09:00"

URGENT_KEYWORDS: Tuple[str, ...] = (
    "긴급", "중요", "빨리", "급한", "급히", "urgent", "asap", "important",
)

DEFERRED_KEYWORDS: Tuple[str, ...] = (
    "나중에", "여유있게", "천천히", "later", "no rush",
)

CATEGORY_KEYWORDS: Dict[TodoCategory, Tuple[str, ...]] = {
    TodoCategory.WORK: (
        "회의", "팀", "프로젝트", "업무", "발표", "보고서", "미팅", "출장",
        "meeting", "project", "report", "presentation", "client",
    ),
    TodoCategory.PERSONAL: (
        "집", "가족", "친구", "쇼핑", "운동", "건강", "병원", "장보기",
        "family", "friend", "shopping", "workout", "gym", "health", "doctor",
    ),
    TodoCategory.STUDY: (
        "공부", "강의", "독서", "코딩", "학습", "강좌", "시험", "과제",
        "study", "lecture", "course", "reading", "coding", "exam", "homework",
    ),
}

# Compounds where a short Hangul keyword is only a syllable of an unrelated word (집중 = focus)
KEYWORD_EXCLUSIONS: Dict[str, Tuple[str, ...]] = {
    "집": ("집중", "집합", "집계", "집필", "집행", "집단", "편집", "수집", "모집", "채집", "밀집", "소집"),
}

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def _contains(text: str, keyword: str) -> bool:
    # Hangul keywords take particles ("회의를"), so plain substring; latin ones need word boundaries
    if keyword.isascii():
        return re.search(rf"\b{re.escape(keyword)}\b", text, flags=re.IGNORECASE) is not None
    for compound in KEYWORD_EXCLUSIONS.get(keyword, ()):
        text = text.replace(compound, " ")
    return keyword in text


def has_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(_contains(text, keyword) for keyword in keywords)


def detect_priority(text: str) -> Optional[TodoPriority]:
    """high for urgency keywords, low for deferral keywords, None when neither appears"""
    if has_any(text, URGENT_KEYWORDS):
        return TodoPriority.HIGH
    if has_any(text, DEFERRED_KEYWORDS):
        return TodoPriority.LOW
    return None


def detect_categories(text: str) -> List[TodoCategory]:
    return [category for category, keywords in CATEGORY_KEYWORDS.items() if has_any(text, keywords)]


def _clean_date(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()).isoformat()
    except ValueError:
        return None


def _clean_time(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    match = _TIME_RE.match(value.strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def normalize_parsed_todo(parsed: ParsedTodo, text: str) -> ParsedTodo:
    """
    Enforce the parsing policy on a model result.

    - due_time defaults to 09:00 when a date is present, and is dropped without one
    - urgency / deferral keywords in the input override the model's priority
    - categories are the union of model and keyword matches, never empty
    """
    due_date = _clean_date(parsed.due_date)
    due_time = _clean_time(parsed.due_time) if due_date else None
    if due_date and not due_time:
        due_time = DEFAULT_DUE_TIME

    priority = detect_priority(text) or parsed.priority

    matched = set(parsed.category) | set(detect_categories(text))
    category = [c for c in TodoCategory if c in matched] or [TodoCategory.PERSONAL]

    title = parsed.title.strip() or text.strip()
    description = parsed.description.strip() if parsed.description else None

    return parsed.model_copy(update={
        "title": title,
        "due_date": due_date,
        "due_time": due_time,
        "priority": priority,
        "category": category,
        "description": description or None,
    })
