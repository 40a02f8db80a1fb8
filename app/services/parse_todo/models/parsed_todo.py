"""Structured output schema for natural-language todo parsing"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.todo import TodoCategory, TodoInput, TodoPriority
from app.utils.datetime_helper import combine_due


class ParsedTodo(BaseModel):
    """AI가 자연어에서 추출한 할 일"""
    title: str = Field(description="할 일의 제목 (간결하고 명확하게)")
    due_date: Optional[str] = Field(None, description="마감일 (YYYY-MM-DD 형식)")
    due_time: Optional[str] = Field(None, description="마감 시간 (HH:MM 형식, 24시간제)")
    priority: TodoPriority = Field(
        TodoPriority.MEDIUM,
        description="우선순위 (high: 긴급/중요, medium: 보통, low: 낮음)",
    )
    category: List[TodoCategory] = Field(
        default_factory=list,
        description="카테고리 (해당되는 모든 카테고리 선택)",
    )
    description: Optional[str] = Field(None, description="할 일의 상세 설명")

    def to_todo_input(self) -> TodoInput:
        """Pre-fill values for the todo form; date and time are joined into one due datetime"""
        due = None
        if self.due_date:
            due = combine_due(date.fromisoformat(self.due_date), self.due_time)

        return TodoInput(
            title=self.title,
            description=self.description,
            due_date=due,
            priority=self.priority,
            category=self.category,
        )
