from app.db.models.user import User
from app.db.models.thought import Thought, ThoughtLike

__all__ = [
    "User",
    "Thought",
    "ThoughtLike",
]
