from app.db.repositories.user_repository import UserRepository
from app.db.repositories.thought_repository import ThoughtRepository

__all__ = [
    "UserRepository",
    "ThoughtRepository"
]
