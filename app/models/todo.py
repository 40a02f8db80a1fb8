"""Todo domain model"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TodoPriority(str, Enum):
    """할 일 우선순위"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TodoCategory(str, Enum):
    """할 일 카테고리 (stored as the Korean labels)"""
    WORK = "업무"
    PERSONAL = "개인"
    STUDY = "학습"


class TodoStatus(str, Enum):
    """할 일 상태 - exactly one applies at any given moment"""
    IN_PROGRESS = "진행 중"
    COMPLETED = "완료"
    OVERDUE = "지연"


def _dedupe_categories(value):
    if value is None:
        return []
    seen = []
    for item in value:
        if item not in seen:
            seen.append(item)
    return seen


class TodoBase(BaseModel):
    """Base todo fields"""
    title: str = Field(min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[TodoPriority] = TodoPriority.MEDIUM
    category: List[TodoCategory] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be empty")
        return v

    @field_validator("category", mode="before")
    @classmethod
    def unique_categories(cls, v):
        return _dedupe_categories(v)


class TodoInput(TodoBase):
    """Form payload for create / edit. Empty description becomes None."""

    @field_validator("description")
    @classmethod
    def empty_description_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("priority")
    @classmethod
    def default_priority(cls, v: Optional[TodoPriority]) -> TodoPriority:
        return v or TodoPriority.MEDIUM


class TodoCreate(TodoBase):
    """Todo creation model"""
    user_id: str   # UUID as string
    completed: bool = False


class TodoUpdate(BaseModel):
    """Todo update model - all fields optional"""
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[TodoPriority] = None
    category: Optional[List[TodoCategory]] = None
    completed: Optional[bool] = None


class Todo(TodoBase):
    """Complete todo model from database"""
    id: str
    user_id: str
    created_date: datetime
    completed: bool = False

    @field_validator("completed", mode="before")
    @classmethod
    def null_is_not_completed(cls, v):
        return bool(v)

    model_config = ConfigDict(from_attributes=True)
