from fastapi import APIRouter
from app.api import auth, health, parse_todo, todos

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(parse_todo.router)
api_router.include_router(todos.router)
