"""Health check endpoints"""

from fastapi import APIRouter

from app.config import PARSE_TODO_MODEL, get_google_api_key

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def health_check():
    """Basic health check; also reports whether the AI parser has a credential"""
    return {
        "status": "healthy",
        "service": "todo-backend",
        "ai_parser": {
            "model": PARSE_TODO_MODEL,
            "configured": bool(get_google_api_key()),
        },
    }
