import uuid
from datetime import datetime
from typing import List, Optional

DEFAULT_CATEGORY = "General"
MIN_MESSAGE_LENGTH = 3


def validate_message(message: str) -> str:
    """Проверка текста мысли, возвращает очищенный текст"""
    if message is None:
        raise ValueError("Message is required")
    cleaned = message.strip()
    if len(cleaned) < MIN_MESSAGE_LENGTH:
        raise ValueError(f"Message must be at least {MIN_MESSAGE_LENGTH} characters long")
    return cleaned


class Thought:
    """Сущность мысли домена Thoughts"""

    def __init__(
        self,
        uuid: uuid.UUID,
        message: str,
        hearts: int = 0,
        liked_by: Optional[List[str]] = None,
        category: str = DEFAULT_CATEGORY,
        created_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.message = message
        self.hearts = hearts
        self.liked_by = list(liked_by or [])
        self.category = category or DEFAULT_CATEGORY
        self.created_at = created_at or datetime.utcnow()

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.liked_by

    def like(self, user_id: str) -> None:
        """Лайк от пользователя: счетчик и список меняются вместе"""
        if self.is_liked_by(user_id):
            raise ValueError("You have already liked this thought")
        self.hearts += 1
        self.liked_by.append(user_id)

    def unlike(self, user_id: str) -> None:
        """Снятие лайка, счетчик не опускается ниже нуля"""
        if not self.is_liked_by(user_id):
            raise ValueError("You haven't liked this thought")
        self.hearts = max(0, self.hearts - 1)
        self.liked_by = [liker for liker in self.liked_by if liker != user_id]

    def update_message(self, new_message: str) -> None:
        self.message = validate_message(new_message)

    def matches_category(self, category: str) -> bool:
        return (self.category or "").lower() == category.lower()

    @classmethod
    def create_thought(cls, message: str, category: Optional[str] = None) -> "Thought":
        """Создание новой мысли"""
        category = (category or "").strip()
        return cls(
            uuid=uuid.uuid4(),
            message=validate_message(message),
            hearts=0,
            liked_by=[],
            category=category or DEFAULT_CATEGORY
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Thought):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"Thought(uuid={self.uuid}, category={self.category}, hearts={self.hearts})"
