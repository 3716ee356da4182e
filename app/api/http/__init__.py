from app.api.http.health import router as health_router
from app.api.http.auth import router as auth_router
from app.api.http.thoughts import router as thoughts_router

__all__ = [
    "health_router",
    "auth_router",
    "thoughts_router"
]
