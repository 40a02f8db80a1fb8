"""Domain models for the application"""
from .todo import (
    Todo,
    TodoBase,
    TodoCategory,
    TodoCreate,
    TodoInput,
    TodoPriority,
    TodoStatus,
    TodoUpdate,
)
from .auth import SignInRequest, SignInResponse, SignUpRequest, SignUpResponse, SignUpStatus

__all__ = [
    'Todo', 'TodoBase', 'TodoCreate', 'TodoInput', 'TodoUpdate',
    'TodoPriority', 'TodoCategory', 'TodoStatus',
    'SignUpRequest', 'SignUpResponse', 'SignUpStatus',
    'SignInRequest', 'SignInResponse',
]
