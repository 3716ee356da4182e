import json
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.thought_repository import ThoughtRepository
from app.domains.thoughts.entities import Thought, DEFAULT_CATEGORY, validate_message
from app.domains.thoughts.schemas import ThoughtCreate

logger = logging.getLogger(__name__)

SORT_BY_DATE = "date"


@dataclass
class ThoughtListQuery:
    """Параметры выборки списка мыслей"""
    category: Optional[str] = None
    sort_by: Optional[str] = None
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def apply_list_query(thoughts: List[Thought], query: ThoughtListQuery) -> Tuple[List[Thought], int]:
    """Фильтрация, сортировка и пагинация уже загруженного набора.

    Возвращает срез страницы и размер отфильтрованного набора.
    """
    if query.category:
        thoughts = [t for t in thoughts if t.matches_category(query.category)]

    if query.sort_by == SORT_BY_DATE:
        thoughts = sorted(thoughts, key=lambda t: t.created_at, reverse=True)

    start = query.offset
    return thoughts[start:start + query.limit], len(thoughts)


class ThoughtService:
    """Сервис для работы с мыслями"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.thought_repository = ThoughtRepository(session)

    async def list_thoughts(self, query: ThoughtListQuery) -> Tuple[List[Thought], int]:
        """Страница мыслей и общее число после фильтра"""
        # Весь набор загружается и фильтруется в памяти
        thoughts = await self.thought_repository.get_all()
        return apply_list_query(thoughts, query)

    async def get_thought(self, thought_uuid: uuid.UUID) -> Optional[Thought]:
        """Получение мысли по UUID"""
        return await self.thought_repository.get_by_uuid(thought_uuid)

    async def get_liked_thoughts(self, client_id: str) -> List[Thought]:
        """Мысли, которые лайкнул пользователь"""
        return await self.thought_repository.get_liked_by(client_id)

    async def create_thought(self, thought_data: ThoughtCreate) -> Thought:
        """Создание новой мысли"""
        thought = Thought.create_thought(
            message=thought_data.message,
            category=thought_data.category
        )
        created = await self.thought_repository.create(thought)
        logger.info("Created thought %s in category %s", created.uuid, created.category)
        return created

    async def update_message(self, thought_uuid: uuid.UUID, new_message: str) -> Optional[Thought]:
        """Замена текста мысли"""
        thought = await self.thought_repository.get_by_uuid(thought_uuid)

        if not thought:
            return None

        thought.update_message(new_message)

        updated = await self.thought_repository.update_message(thought_uuid, thought.message)
        if updated:
            logger.info("Updated message of thought %s", thought_uuid)
        return updated

    async def delete_thought(self, thought_uuid: uuid.UUID) -> Optional[Thought]:
        """Удаление мысли, возвращает ее состояние до удаления"""
        deleted = await self.thought_repository.delete(thought_uuid)
        if deleted:
            logger.info("Deleted thought %s", thought_uuid)
        return deleted

    async def like_thought(self, thought_uuid: uuid.UUID, user_id: str) -> Optional[Thought]:
        """Лайк мысли от пользователя"""
        thought = await self.thought_repository.get_by_uuid(thought_uuid)

        if not thought:
            return None

        thought.like(user_id)

        # Уникальный индекс отсекает повторный лайк из параллельного запроса
        if not await self.thought_repository.add_like(thought_uuid, user_id):
            # Мысль могли удалить между чтением и вставкой лайка
            if not await self.thought_repository.get_by_uuid(thought_uuid):
                return None
            logger.info("Rejected concurrent double like by %s on %s", user_id, thought_uuid)
            raise ValueError("You have already liked this thought")

        logger.info("User %s liked thought %s", user_id, thought_uuid)
        return await self.thought_repository.get_by_uuid(thought_uuid)

    async def unlike_thought(self, thought_uuid: uuid.UUID, user_id: str) -> Optional[Thought]:
        """Снятие лайка"""
        thought = await self.thought_repository.get_by_uuid(thought_uuid)

        if not thought:
            return None

        thought.unlike(user_id)

        if not await self.thought_repository.remove_like(thought_uuid, user_id):
            if not await self.thought_repository.get_by_uuid(thought_uuid):
                return None
            raise ValueError("You haven't liked this thought")

        logger.info("User %s unliked thought %s", user_id, thought_uuid)
        return await self.thought_repository.get_by_uuid(thought_uuid)

    async def seed_from_file(self, path: str) -> int:
        """Начальное заполнение пустой коллекции из JSON файла"""
        if await self.thought_repository.count() > 0:
            logger.info("Thoughts table is not empty, skipping seed")
            return 0

        with open(Path(path), encoding="utf-8") as f:
            records = json.load(f)

        thoughts = [self._from_seed_record(record) for record in records]
        await self.thought_repository.create_many(thoughts)
        logger.info("Seeded %d thoughts from %s", len(thoughts), path)
        return len(thoughts)

    @staticmethod
    def _from_seed_record(record: dict) -> Thought:
        created_at = record.get("createdAt")
        if created_at:
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
            # Храним наивное UTC время
            if created_at.tzinfo is not None:
                created_at = created_at.astimezone(timezone.utc).replace(tzinfo=None)
        return Thought(
            uuid=uuid.uuid4(),
            message=validate_message(record["message"]),
            hearts=max(0, int(record.get("hearts") or 0)),
            liked_by=[],
            category=record.get("category") or DEFAULT_CATEGORY,
            created_at=created_at
        )
